import threading

from flash_report.extraction.base import BaseExtractor
from flash_report.extraction.exceptions import ConfigError
from flash_report.extraction.models import BoundingBox
from flash_report.imaging.cropper import Cropper
from flash_report.logging.logger import Log
from flash_report.session.exceptions import InvalidTransitionError, UploadValidationError
from flash_report.session.models import (
    AppState,
    Error,
    Processing,
    Result,
    UploadAsset,
    Uploading,
)
from flash_report.session.upload import validate_upload

GENERIC_FAILURE_MESSAGE = "Failed to translate the poster. Please try again."


class PosterSession:
    """Single-user upload -> extract -> crop -> result state machine.

    States: Uploading -> Processing -> Result | Error; reset() returns to
    Uploading from any state. State changes are serialized by a lock; the
    extraction itself runs outside it so reset() is never blocked.
    """

    def __init__(
        self,
        extractor: BaseExtractor,
        cropper: Cropper,
        *,
        max_upload_bytes: int,
    ) -> None:
        self._extractor = extractor
        self._cropper = cropper
        self._max_upload_bytes = max_upload_bytes
        self._state: AppState = Uploading()
        self._lock = threading.Lock()
        self.validation_message = ""

    @property
    def state(self) -> AppState:
        return self._state

    def select_file(self, filename: str, mime_type: str | None, data: bytes) -> bool:
        """Accept a file and enter Processing; False if validation rejected it."""
        with self._lock:
            if not isinstance(self._state, Uploading):
                raise InvalidTransitionError(
                    f"Cannot accept a file while {self._state.kind}"
                )
            try:
                effective_type = validate_upload(filename, mime_type, data, self._max_upload_bytes)
            except UploadValidationError as exc:
                Log.warning(f"Upload rejected: {exc}", filename=filename, mime_type=mime_type)
                self.validation_message = str(exc)
                return False

            asset = UploadAsset.from_bytes(effective_type, data, filename=filename)
            self.validation_message = ""
            self._state = Processing(asset=asset)
        Log.info(f"Upload accepted: {len(data)} bytes", filename=filename, mime_type=effective_type)
        return True

    def process(self) -> AppState:
        """Run the extraction for the pending upload and settle in Result or Error."""
        with self._lock:
            pending = self._state
            if not isinstance(pending, Processing):
                raise InvalidTransitionError(f"Nothing to process while {pending.kind}")
        outcome = self._run(pending.asset)
        with self._lock:
            if self._state is not pending:
                Log.info("Session was reset during extraction, discarding outcome")
                return self._state
            self._state = outcome
        return outcome

    def reset(self) -> None:
        """Discard record, asset and messages and return to Uploading."""
        with self._lock:
            self._state = Uploading()
            self.validation_message = ""
        Log.debug("Session reset")

    def _run(self, asset: UploadAsset) -> AppState:
        try:
            record = self._extractor.extract_and_translate(asset.payload, asset.mime_type)
        except ConfigError as exc:
            Log.error(f"Extraction not configured: {exc}")
            return Error(message=str(exc) or GENERIC_FAILURE_MESSAGE, credential_missing=True)
        except Exception as exc:
            Log.error(f"Extraction failed: {exc}", filename=asset.filename)
            return Error(message=str(exc) or GENERIC_FAILURE_MESSAGE)

        if asset.is_image and record.box_2d is not None:
            asset = self._crop_or_keep(asset, record.box_2d)
        return Result(record=record, asset=asset)

    def _crop_or_keep(self, asset: UploadAsset, box: BoundingBox) -> UploadAsset:
        try:
            return self._cropper.crop(asset, box)
        except Exception as exc:
            Log.warning(f"Cropping failed, keeping original: {exc}", filename=asset.filename)
            return asset
