from abc import ABC, abstractmethod

from flash_report.extraction.models import IncidentRecord


class BaseExtractor(ABC):
    """Contract for all poster extraction adapters."""

    @abstractmethod
    def extract_and_translate(self, payload: bytes, mime_type: str) -> IncidentRecord:
        """Extract incident details from a poster and translate them into Urdu.

        Args:
            payload: Raw bytes of the uploaded image or PDF.
            mime_type: MIME type of the payload.

        Returns:
            IncidentRecord with every text field in Urdu and an optional photo box.

        Raises:
            ConfigError: if no API credential is configured.
            UpstreamError: if the service returns no usable output.
        """
