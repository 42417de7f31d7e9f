import pymupdf

from flash_report.pdf.base import BasePdfRasterizer
from flash_report.pdf.exceptions import PdfRenderError


class PyMuPdfAdapter(BasePdfRasterizer):
    """Renders PDF pages to PNG using PyMuPDF."""

    def render_pages(self, pdf_bytes: bytes, *, max_pages: int, dpi: int) -> list[bytes]:
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                if doc.page_count == 0:
                    raise PdfRenderError("PDF has no pages")
                count = min(doc.page_count, max(1, max_pages))
                return [
                    doc[index].get_pixmap(dpi=dpi, alpha=False).tobytes("png")
                    for index in range(count)
                ]
        except PdfRenderError:
            raise
        except Exception as exc:
            raise PdfRenderError(f"pymupdf rendering failed: {exc}") from exc
