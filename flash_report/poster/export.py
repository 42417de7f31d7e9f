from dataclasses import dataclass
from datetime import date

from flash_report.config.settings import Settings


@dataclass(frozen=True)
class ExportOptions:
    """Parameters handed to the browser rasterizer for the JPEG download."""

    scale: int
    jpeg_quality: float
    filename: str


def export_filename(prefix: str, day: date) -> str:
    return f"{prefix}-{day.isoformat()}.jpg"


def build_export_options(settings: Settings, today: date | None = None) -> ExportOptions:
    return ExportOptions(
        scale=settings.export_scale,
        jpeg_quality=max(0.0, min(1.0, settings.export_jpeg_quality)),
        filename=export_filename(settings.export_filename_prefix, today or date.today()),
    )
