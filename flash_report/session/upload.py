import mimetypes

from flash_report.session.exceptions import UploadValidationError

UNSUPPORTED_TYPE_MESSAGE = "Please upload an image file (JPG, PNG) or PDF."
_GENERIC_MIME_TYPES = frozenset({"", "application/octet-stream"})


def is_supported_mime_type(mime_type: str) -> bool:
    return mime_type.startswith("image/") or "pdf" in mime_type


def validate_upload(filename: str, mime_type: str | None, data: bytes, max_bytes: int) -> str:
    """Check an uploaded file and return its effective MIME type.

    A missing or generic declared type is replaced by a guess from the filename.

    Raises:
        UploadValidationError: for unsupported types, empty files or files over max_bytes.
    """
    effective = (mime_type or "").strip().lower()
    if effective in _GENERIC_MIME_TYPES:
        guessed, _ = mimetypes.guess_type(filename)
        effective = (guessed or "").lower()
    if not is_supported_mime_type(effective):
        raise UploadValidationError(UNSUPPORTED_TYPE_MESSAGE)
    if not data:
        raise UploadValidationError("The selected file is empty.")
    if len(data) > max_bytes:
        limit_mb = max_bytes / (1024 * 1024)
        raise UploadValidationError(f"The selected file is larger than {limit_mb:g} MB.")
    return effective
