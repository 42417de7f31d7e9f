"""Validates parsed provider JSON and builds the incident record."""

import math
from typing import Any

from flash_report.extraction.exceptions import UpstreamValidationError
from flash_report.extraction.models import BoundingBox, IncidentRecord
from flash_report.logging.logger import Log

REQUIRED_TEXT_FIELDS = (
    "title",
    "operation",
    "department",
    "location",
    "company",
    "date",
    "time",
    "classification",
    "fatal_risk",
    "severity",
    "summary",
    "how_it_happened",
    "actions",
)


def validate_and_build(data: dict[str, Any]) -> IncidentRecord:
    """Validate raw parsed JSON and build an IncidentRecord.

    A malformed ``box_2d`` only drops the crop hint; missing or non-string
    text fields reject the whole response.

    Raises:
        UpstreamValidationError: on any text field violation.
    """
    fields = {name: _require_text(data, name) for name in REQUIRED_TEXT_FIELDS}
    return IncidentRecord(
        **fields,
        image_caption=_build_caption(data.get("image_caption")),
        box_2d=_build_box(data.get("box_2d")),
    )


def _require_text(data: dict[str, Any], field: str) -> str:
    if field not in data:
        raise UpstreamValidationError(f"Missing required field: {field}")
    value = data[field]
    if not isinstance(value, str):
        raise UpstreamValidationError(f"'{field}' must be a string")
    return value


def _build_caption(raw: Any) -> str:
    if raw is None:
        return ""
    if not isinstance(raw, str):
        raise UpstreamValidationError("'image_caption' must be a string or null")
    return raw


def _build_box(raw: Any) -> BoundingBox | None:
    if raw is None:
        return None
    if not isinstance(raw, list) or len(raw) != 4:
        Log.warning(f"Ignoring box_2d that is not a 4-element list: {raw!r}")
        return None
    if not all(isinstance(v, (int, float)) and not isinstance(v, bool) for v in raw):
        Log.warning(f"Ignoring box_2d with non-numeric values: {raw!r}")
        return None
    if not all(math.isfinite(v) for v in raw):
        Log.warning(f"Ignoring box_2d with non-finite values: {raw!r}")
        return None
    ymin, xmin, ymax, xmax = (float(v) for v in raw)
    return (ymin, xmin, ymax, xmax)
