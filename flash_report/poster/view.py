import re
from dataclasses import dataclass, field
from typing import ClassVar

from flash_report.extraction.models import IncidentRecord
from flash_report.session.models import UploadAsset

_BULLET_PREFIX = re.compile(r"^[\-•*\d.]+\s*")


@dataclass(frozen=True)
class InfoRow:
    """One label/value row of the details table."""

    label: str
    value: str
    highlight: bool = False
    red_text: bool = False


@dataclass(frozen=True)
class PosterView:
    """Everything the poster template needs; alignment and spacing are view state only."""

    SPACING_CLASSES: ClassVar[dict[str, str]] = {
        "tight": "py-1",
        "normal": "py-3",
        "loose": "py-5",
    }
    ALIGNMENTS: ClassVar[tuple[str, ...]] = ("left", "right")

    record: IncidentRecord
    image_src: str
    is_pdf: bool
    rows: list[InfoRow] = field(default_factory=list)
    action_points: list[str] = field(default_factory=list)
    align: str = "right"
    spacing: str = "normal"

    @property
    def spacing_class(self) -> str:
        return self.SPACING_CLASSES[self.spacing]


def info_rows(record: IncidentRecord) -> list[InfoRow]:
    return [
        InfoRow("آپریشن", record.operation),
        InfoRow("شعبہ", record.department),
        InfoRow("مقام", record.location),
        InfoRow("کمپنی", record.company),
        InfoRow("تاریخ", record.date),
        InfoRow("وقت", record.time),
        InfoRow("درجہ بندی", record.classification, highlight=True),
        InfoRow("مہلک خطرہ", record.fatal_risk),
        InfoRow("شدت", record.severity, red_text=True),
    ]


def action_points(actions: str) -> list[str]:
    """Split newline-delimited actions into points, dropping bullets the model added."""
    points = []
    for line in actions.split("\n"):
        if not line.strip():
            continue
        point = _BULLET_PREFIX.sub("", line.strip()).strip()
        if point:
            points.append(point)
    return points


def build_poster_view(
    record: IncidentRecord,
    asset: UploadAsset,
    *,
    align: str = "right",
    spacing: str = "normal",
) -> PosterView:
    """Lay out a record for the poster; unknown align/spacing values fall back to defaults."""
    if align not in PosterView.ALIGNMENTS:
        align = "right"
    if spacing not in PosterView.SPACING_CLASSES:
        spacing = "normal"
    return PosterView(
        record=record,
        image_src="" if asset.is_pdf else asset.data_url,
        is_pdf=asset.is_pdf,
        rows=info_rows(record),
        action_points=action_points(record.actions),
        align=align,
        spacing=spacing,
    )
