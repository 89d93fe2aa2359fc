"""Image post-processing for screenshots."""

import io
import base64

from PIL import Image


def downscale_png(png_b64: str, max_width: int) -> str:
    """
    Shrink a base64 PNG to at most `max_width` pixels wide, keeping the aspect ratio.

    Images already narrower than `max_width` (or a non-positive `max_width`)
    are returned unchanged.
    """
    if not max_width or max_width <= 0:
        return png_b64

    img = Image.open(io.BytesIO(base64.b64decode(png_b64)))
    if img.width <= max_width:
        return png_b64

    height = max(1, int(img.height * max_width / img.width))
    img.thumbnail((max_width, height), Image.Resampling.LANCZOS)

    buffer = io.BytesIO()
    img.save(buffer, format="PNG", optimize=True)
    return base64.b64encode(buffer.getvalue()).decode("utf-8")


__all__ = ["downscale_png"]
