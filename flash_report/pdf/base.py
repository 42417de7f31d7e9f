from abc import ABC, abstractmethod


class BasePdfRasterizer(ABC):
    """Contract for PDF page rendering adapters."""

    @abstractmethod
    def render_pages(self, pdf_bytes: bytes, *, max_pages: int, dpi: int) -> list[bytes]:
        """Render the leading pages of a PDF to PNG images.

        Args:
            pdf_bytes: Raw PDF file content.
            max_pages: Maximum number of pages to render, counted from the first page.
            dpi: Render resolution.

        Returns:
            PNG-encoded bytes, one entry per rendered page.

        Raises:
            PdfRenderError: if the document cannot be opened, has no pages,
                or a page fails to render.
        """
