from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    host: str = "127.0.0.1"
    port: int = 8000

    extraction_provider: str = "gemini"
    extraction_timeout_seconds: int = 120
    extraction_temperature: float = 0.0

    extraction_openai_api_key: str = ""
    extraction_openai_model_name: str = "gpt-4o-mini"

    extraction_gemini_api_key: str = ""
    extraction_gemini_model_name: str = "gemini-2.5-flash"

    extraction_openrouter_api_key: str = ""
    extraction_openrouter_model_name: str = "google/gemini-2.5-flash"

    extraction_ollama_api_key: str = ""
    extraction_ollama_model_name: str = "llava"

    extraction_openai_compatible_api_key: str = ""
    extraction_openai_compatible_model_name: str = ""
    extraction_openai_compatible_base_url: str = ""

    pdf_upload_mode: str = "render"
    pdf_render_dpi: int = 150
    pdf_max_pages: int = 2

    max_upload_bytes: int = 20 * 1024 * 1024

    export_scale: int = 4
    export_jpeg_quality: float = 0.9
    export_filename_prefix: str = "Barrick-Safety-Incident-Urdu"
