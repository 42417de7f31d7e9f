from abc import ABC, abstractmethod

from flash_report.extraction.models import DocumentPart


class BaseExtractionClient(ABC):
    """Contract for provider-specific multimodal AI clients."""

    @abstractmethod
    def create_structured_completion(
        self,
        *,
        model: str,
        temperature: float,
        instructions: str,
        documents: list[DocumentPart],
        json_schema: dict[str, object],
    ) -> str:
        """Send the documents and instructions in one request; return the response text."""
