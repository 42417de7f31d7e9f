import io
import math

from PIL import Image, ImageOps

from flash_report.extraction.models import BoundingBox
from flash_report.imaging.models import PixelRect
from flash_report.logging.logger import Log
from flash_report.session.models import UploadAsset

NORMALIZED_SCALE = 1000.0


def map_box_to_pixels(box: BoundingBox, image_width: int, image_height: int) -> PixelRect | None:
    """Map a [ymin, xmin, ymax, xmax] box on the 0-1000 scale to pixels.

    Returns None when the box has no positive width or height, or a non-finite value.
    """
    if not all(math.isfinite(v) for v in box):
        return None
    ymin, xmin, ymax, xmax = box
    width = (xmax - xmin) / NORMALIZED_SCALE * image_width
    height = (ymax - ymin) / NORMALIZED_SCALE * image_height
    if width <= 0 or height <= 0:
        return None
    return PixelRect(
        x=xmin / NORMALIZED_SCALE * image_width,
        y=ymin / NORMALIZED_SCALE * image_height,
        width=width,
        height=height,
    )


class Cropper:
    """Crops an uploaded image to the detected incident photo.

    Cropping is cosmetic: every failure returns the original asset.
    """

    def crop(self, asset: UploadAsset, box: BoundingBox) -> UploadAsset:
        try:
            with Image.open(io.BytesIO(asset.payload)) as source:
                image = ImageOps.exif_transpose(source)
                return self._crop_image(asset, image, box)
        except Exception as exc:
            Log.warning(f"Cropping failed, using original: {exc}", filename=asset.filename)
            return asset

    def _crop_image(self, asset: UploadAsset, image: Image.Image, box: BoundingBox) -> UploadAsset:
        rect = map_box_to_pixels(box, image.width, image.height)
        crop_box = rect.crop_box(image.width, image.height) if rect else None
        if crop_box is None:
            Log.info(f"Photo box {box} gives no usable crop, keeping original")
            return asset

        cropped = image.crop(crop_box)
        has_alpha = "A" in cropped.getbands() or "transparency" in cropped.info
        cropped = cropped.convert("RGBA" if has_alpha else "RGB")
        buf = io.BytesIO()
        cropped.save(buf, format="PNG")
        Log.info(f"Cropped photo to {crop_box}", filename=asset.filename)
        return UploadAsset.from_bytes("image/png", buf.getvalue(), filename=asset.filename)
