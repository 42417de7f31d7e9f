"""AI-powered poster extractor and Urdu translator."""

import json
from pathlib import Path

from flash_report.extraction.base import BaseExtractor
from flash_report.extraction.client_base import BaseExtractionClient
from flash_report.extraction.exceptions import ConfigError, ExtractionError, UpstreamError
from flash_report.extraction.models import DocumentPart, IncidentRecord
from flash_report.extraction.prompt_loader import load_instructions, load_json_schema
from flash_report.extraction.validator import validate_and_build
from flash_report.logging.logger import Log
from flash_report.pdf.base import BasePdfRasterizer
from flash_report.pdf.exceptions import PdfRenderError

MISSING_CREDENTIAL_MESSAGE = "API Key is missing. Please select an API Key."


class Extractor(BaseExtractor):
    """Sends one poster to an AI provider and builds an IncidentRecord from its answer.

    When a PDF rasterizer is given, PDFs are sent as rendered page images
    instead of as a file, for providers without PDF input support.
    """

    def __init__(
        self,
        *,
        client: BaseExtractionClient,
        model: str,
        temperature: float = 0.0,
        credential_configured: bool = True,
        pdf_rasterizer: BasePdfRasterizer | None = None,
        pdf_max_pages: int = 2,
        pdf_render_dpi: int = 150,
        instructions_path: Path | None = None,
        json_schema_path: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(0.2, temperature))
        self._credential_configured = credential_configured
        self._pdf_rasterizer = pdf_rasterizer
        self._pdf_max_pages = pdf_max_pages
        self._pdf_render_dpi = pdf_render_dpi
        self._instructions = load_instructions(instructions_path)
        self._json_schema = json.loads(load_json_schema(json_schema_path))

    def extract_and_translate(self, payload: bytes, mime_type: str) -> IncidentRecord:
        if not self._credential_configured:
            raise ConfigError(MISSING_CREDENTIAL_MESSAGE)

        documents = self._build_documents(payload, mime_type)
        Log.info(
            f"Requesting extraction for {len(documents)} document part(s)",
            model=self._model,
            mime_type=mime_type,
        )
        raw_response = self._client.create_structured_completion(
            model=self._model,
            temperature=self._temperature,
            instructions=self._instructions,
            documents=documents,
            json_schema=self._json_schema,
        )
        Log.debug(f"AI raw response:\n{raw_response}")

        record = validate_and_build(self._parse_json(raw_response))
        Log.info(f"Extraction complete: photo box {'found' if record.box_2d else 'absent'}")
        return record

    def _build_documents(self, payload: bytes, mime_type: str) -> list[DocumentPart]:
        if "pdf" not in mime_type or self._pdf_rasterizer is None:
            return [DocumentPart(mime_type=mime_type, data=payload, filename=_filename_for(mime_type))]
        try:
            pages = self._pdf_rasterizer.render_pages(
                payload,
                max_pages=self._pdf_max_pages,
                dpi=self._pdf_render_dpi,
            )
        except PdfRenderError as exc:
            raise ExtractionError(f"Could not read the PDF document: {exc}") from exc
        return [
            DocumentPart(mime_type="image/png", data=page, filename=f"page-{index}.png")
            for index, page in enumerate(pages, start=1)
        ]

    @staticmethod
    def _parse_json(raw: str) -> dict[str, object]:
        if not raw or not raw.strip():
            raise UpstreamError("No response from the AI service.")
        try:
            parsed = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise UpstreamError(f"Invalid JSON response: {exc}") from exc

        if not isinstance(parsed, dict):
            raise UpstreamError("JSON response must be an object")
        return parsed


def _filename_for(mime_type: str) -> str:
    subtype = mime_type.rsplit("/", 1)[-1] or "bin"
    return f"poster.{subtype}"
