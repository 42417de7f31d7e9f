import base64
from dataclasses import dataclass
from typing import ClassVar

from flash_report.extraction.models import IncidentRecord


@dataclass(frozen=True)
class UploadAsset:
    """In-memory uploaded file, held as a data URL."""

    mime_type: str
    data_url: str
    filename: str = ""

    @classmethod
    def from_bytes(cls, mime_type: str, data: bytes, filename: str = "") -> "UploadAsset":
        encoded = base64.b64encode(data).decode("ascii")
        return cls(
            mime_type=mime_type,
            data_url=f"data:{mime_type};base64,{encoded}",
            filename=filename,
        )

    @property
    def payload(self) -> bytes:
        """Raw bytes without the data URL prefix."""
        _, _, encoded = self.data_url.partition(",")
        return base64.b64decode(encoded)

    @property
    def is_image(self) -> bool:
        return self.mime_type.startswith("image/")

    @property
    def is_pdf(self) -> bool:
        return "pdf" in self.mime_type


@dataclass(frozen=True)
class Uploading:
    """Waiting for a file."""

    kind: ClassVar[str] = "uploading"


@dataclass(frozen=True)
class Processing:
    """Extraction in flight for the given asset."""

    asset: UploadAsset
    kind: ClassVar[str] = "processing"


@dataclass(frozen=True)
class Result:
    """Translated record ready to render, with the (possibly cropped) asset."""

    record: IncidentRecord
    asset: UploadAsset
    kind: ClassVar[str] = "result"


@dataclass(frozen=True)
class Error:
    """Extraction failed; ``credential_missing`` offers credential remediation."""

    message: str
    credential_missing: bool = False
    kind: ClassVar[str] = "error"


AppState = Uploading | Processing | Result | Error
