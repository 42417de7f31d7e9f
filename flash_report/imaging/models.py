from dataclasses import dataclass


@dataclass(frozen=True)
class PixelRect:
    """Crop rectangle in source image pixels."""

    x: float
    y: float
    width: float
    height: float

    def crop_box(self, image_width: int, image_height: int) -> tuple[int, int, int, int] | None:
        """Integer (left, upper, right, lower) box clamped to the image, or None if empty."""
        left = max(0, round(self.x))
        upper = max(0, round(self.y))
        right = min(image_width, round(self.x + self.width))
        lower = min(image_height, round(self.y + self.height))
        if right <= left or lower <= upper:
            return None
        return left, upper, right, lower
