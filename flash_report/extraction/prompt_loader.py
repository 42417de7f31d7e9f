from pathlib import Path

from flash_report.extraction.exceptions import ExtractionError

_BUNDLED_DIR = Path(__file__).parent / "prompts"
INSTRUCTIONS_FILE = "extraction_instructions.txt"
SCHEMA_FILE = "incident_schema.json"


def load_instructions(path: Path | None = None) -> str:
    """Load the translation and photo-detection instructions sent with every poster.

    Raises:
        ExtractionError: if the file cannot be read.
    """
    return _read_bundled(path or _BUNDLED_DIR / INSTRUCTIONS_FILE, "extraction instructions")


def load_json_schema(path: Path | None = None) -> str:
    """Load the strict JSON schema of the incident record, as raw text."""
    return _read_bundled(path or _BUNDLED_DIR / SCHEMA_FILE, "JSON schema")


def _read_bundled(path: Path, label: str) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ExtractionError(f"Failed to load {label}: {exc}") from exc
