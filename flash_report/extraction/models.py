import base64
from dataclasses import dataclass

BoundingBox = tuple[float, float, float, float]


@dataclass(frozen=True)
class DocumentPart:
    """One binary document sent to the AI provider."""

    mime_type: str
    data: bytes
    filename: str = "document"

    @property
    def is_pdf(self) -> bool:
        return "pdf" in self.mime_type

    def data_url(self) -> str:
        encoded = base64.b64encode(self.data).decode("ascii")
        return f"data:{self.mime_type};base64,{encoded}"


@dataclass(frozen=True)
class IncidentRecord:
    """Incident fields extracted from a poster, already translated to Urdu.

    ``actions`` is a newline-delimited list of points. ``box_2d`` is the
    photo region as ``(ymin, xmin, ymax, xmax)`` on a 0-1000 scale, or
    None when the source has no usable photo.
    """

    title: str
    operation: str
    department: str
    location: str
    company: str
    date: str
    time: str
    classification: str
    fatal_risk: str
    severity: str
    summary: str
    how_it_happened: str
    actions: str
    image_caption: str = ""
    box_2d: BoundingBox | None = None
