from typing import ClassVar

from flash_report.config.settings import Settings
from flash_report.extraction.base import BaseExtractor
from flash_report.extraction.example_client_adapter import ExampleClientAdapter
from flash_report.extraction.extractor import Extractor
from flash_report.extraction.openai_client_adapter import OpenAIClientAdapter
from flash_report.pdf.base import BasePdfRasterizer
from flash_report.pdf.pymupdf_adapter import PyMuPdfAdapter


class ExtractorFactory:
    """Creates the configured extractor."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "gemini": "https://generativelanguage.googleapis.com/v1beta/openai/",
        "openrouter": "https://openrouter.ai/api/v1",
        "ollama": "http://localhost:11434/v1",
    }
    KEYLESS_PROVIDERS: ClassVar[frozenset[str]] = frozenset({"ollama"})
    PDF_UPLOAD_MODES: ClassVar[frozenset[str]] = frozenset({"render", "file"})

    @classmethod
    def create(cls, settings: Settings) -> BaseExtractor:
        """Create a configured extractor from application settings."""
        provider = settings.extraction_provider.lower()
        pdf_rasterizer = cls._resolve_pdf_rasterizer(settings)
        if provider == "example":
            return Extractor(
                client=ExampleClientAdapter(),
                model="example",
                pdf_rasterizer=pdf_rasterizer,
                pdf_max_pages=settings.pdf_max_pages,
                pdf_render_dpi=settings.pdf_render_dpi,
            )
        base_url = cls._resolve_base_url(provider, settings)
        api_key = getattr(settings, cls.api_key_field(provider))
        client = OpenAIClientAdapter(
            api_key=api_key,
            timeout_seconds=settings.extraction_timeout_seconds,
            base_url=base_url,
        )
        return Extractor(
            client=client,
            model=getattr(settings, f"extraction_{provider}_model_name"),
            temperature=settings.extraction_temperature,
            credential_configured=bool(api_key) or provider in cls.KEYLESS_PROVIDERS,
            pdf_rasterizer=pdf_rasterizer,
            pdf_max_pages=settings.pdf_max_pages,
            pdf_render_dpi=settings.pdf_render_dpi,
        )

    @classmethod
    def api_key_field(cls, provider: str) -> str:
        """Name of the settings field holding the API key of a provider."""
        return f"extraction_{provider.lower()}_api_key"

    @classmethod
    def with_api_key(cls, settings: Settings, api_key: str) -> Settings:
        """Return settings with the active provider's API key replaced."""
        field = cls.api_key_field(settings.extraction_provider)
        if field not in Settings.model_fields:
            raise ValueError(
                f"Provider '{settings.extraction_provider}' does not take an API key"
            )
        return settings.model_copy(update={field: api_key.strip()})

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return None
        if provider == "openai_compatible":
            url = settings.extraction_openai_compatible_base_url.strip()
            if not url:
                raise ValueError(
                    "extraction_openai_compatible_base_url is required for "
                    "extraction_provider=openai_compatible"
                )
            return url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return default_base_url
        supported = [
            "example",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(
            f"Unknown extraction provider '{provider}'. Choose from: {supported}"
        )

    @classmethod
    def _resolve_pdf_rasterizer(cls, settings: Settings) -> BasePdfRasterizer | None:
        mode = settings.pdf_upload_mode.lower()
        if mode not in cls.PDF_UPLOAD_MODES:
            raise ValueError(
                f"Unknown PDF upload mode '{mode}'. Choose from: {sorted(cls.PDF_UPLOAD_MODES)}"
            )
        return PyMuPdfAdapter() if mode == "render" else None
