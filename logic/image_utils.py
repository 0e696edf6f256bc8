import base64
import io
import math
import os
from typing import List, Union

from PIL import Image

ImageSource = Union[Image.Image, str, os.PathLike, bytes]

# modes the PNG writer accepts as-is
_PNG_MODES = {"1", "L", "LA", "I", "I;16", "P", "RGB", "RGBA"}


def _png_compatible(img: Image.Image) -> Image.Image:
    if img.mode in _PNG_MODES:
        return img
    if img.mode == "F":
        return img.convert("L")
    if "A" in img.getbands() or "a" in img.getbands():
        return img.convert("RGBA")
    return img.convert("RGB")


def _encode_png(img: Image.Image) -> bytes:
    buf = io.BytesIO()
    _png_compatible(img).save(buf, format="PNG")
    return buf.getvalue()


def image_to_png_bytes(image: ImageSource) -> bytes:
    """
    Encode an image as PNG.

    Accepts a Pillow image, a path to an image file, or the raw bytes of an
    encoded image (any format Pillow can read). Multi-frame files contribute
    their first frame.
    """
    if isinstance(image, Image.Image):
        return _encode_png(image)

    if isinstance(image, (bytes, bytearray)):
        try:
            img = Image.open(io.BytesIO(image))
        except Exception as e:
            raise ValueError("Image bytes are not in a format Pillow can read.") from e
    else:
        if not os.path.exists(image):
            raise ValueError(f"Could not read image: {image}")
        img = Image.open(image)

    with img:
        return _encode_png(img)


def image_to_base64_png(image: ImageSource) -> str:
    return base64.b64encode(image_to_png_bytes(image)).decode("ascii")


def split_fragments(text: str, size: int) -> List[str]:
    """
    Split `text` into chunks of at most `size` characters.

    Always returns at least one fragment, so empty text yields [""].
    """
    if size <= 0:
        raise ValueError(f"Fragment size must be positive, got {size}")

    count = max(1, math.ceil(len(text) / size))
    return [text[i * size:(i + 1) * size] for i in range(count)]
