import httpx
import openai

from flash_report.extraction.client_base import BaseExtractionClient
from flash_report.extraction.exceptions import UpstreamError, UpstreamNetworkError
from flash_report.extraction.models import DocumentPart


class OpenAIClientAdapter(BaseExtractionClient):
    """Extraction client built on the OpenAI-compatible chat completions API."""

    SCHEMA_NAME = "incident_record"

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
            max_retries=0,
        )

    def create_structured_completion(
        self,
        *,
        model: str,
        temperature: float,
        instructions: str,
        documents: list[DocumentPart],
        json_schema: dict[str, object],
    ) -> str:
        content: list[dict[str, object]] = [self._document_content(d) for d in documents]
        content.append({"type": "text", "text": instructions})
        try:
            response = self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                response_format={
                    "type": "json_schema",
                    "json_schema": {
                        "name": self.SCHEMA_NAME,
                        "strict": True,
                        "schema": json_schema,
                    },
                },
                messages=[{"role": "user", "content": content}],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise UpstreamNetworkError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise UpstreamNetworkError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise UpstreamError("AI returned no choices")
        text = response.choices[0].message.content
        if not text:
            raise UpstreamError("AI returned empty response")
        return text

    @staticmethod
    def _document_content(document: DocumentPart) -> dict[str, object]:
        if document.is_pdf:
            return {
                "type": "file",
                "file": {"filename": document.filename, "file_data": document.data_url()},
            }
        return {"type": "image_url", "image_url": {"url": document.data_url()}}
