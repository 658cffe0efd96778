"""Decode an image and composite it, scaled and centred, onto a square canvas.

The image is scaled uniformly so it fits entirely inside the canvas
(no distortion), centred, and drawn over a solid background fill. Any
area the image does not cover (the letterbox) is therefore a known,
opaque colour rather than transparent.
"""

import numpy as np
from PIL import Image, ImageOps, UnidentifiedImageError

from pixelify.core.colour import hex_to_rgb
from pixelify.core.types import BACKGROUND, CANVAS_SIZE, DecodeError, Placement


def load_image(source) -> Image.Image:
    """Open and fully decode an image from a path or binary file object."""
    try:
        image = Image.open(source)
        image.load()
    except (FileNotFoundError, IsADirectoryError) as e:
        raise DecodeError(f'image not found: {source}') from e
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, EOFError, SyntaxError, ValueError) as e:
        raise DecodeError(f'cannot decode image {source}: {e}') from e
    # Camera photos: honour the EXIF orientation the way a browser does
    image = ImageOps.exif_transpose(image)
    if image.width <= 0 or image.height <= 0:
        raise DecodeError(f'image has no pixels: {source}')
    return image


def fit(image_width: int, image_height: int, canvas_size: int = CANVAS_SIZE) -> Placement:
    """Scale and offsets that fit an image inside the canvas, centred."""
    if image_width <= 0 or image_height <= 0:
        raise ValueError(f'image dimensions must be positive, got {image_width}x{image_height}')
    scale = min(canvas_size / image_width, canvas_size / image_height)
    draw_width = image_width * scale
    draw_height = image_height * scale
    return Placement(
        scale=scale,
        draw_width=draw_width,
        draw_height=draw_height,
        offset_x=(canvas_size - draw_width) / 2,
        offset_y=(canvas_size - draw_height) / 2,
    )


_HIGH_DEPTH_MODES = ('I', 'I;16', 'I;16L', 'I;16B', 'I;16N')


def _to_8bit(image: Image.Image) -> Image.Image:
    """Scale 16/32-bit integer greyscale down to 8-bit 'L'."""
    arr = np.clip(np.asarray(image, dtype=np.int64), 0, 65535) >> 8
    return Image.fromarray(arr.astype(np.uint8))


def composite(
    image: Image.Image,
    canvas_size: int = CANVAS_SIZE,
    background: str = BACKGROUND,
) -> Image.Image:
    """Draw image onto a canvas_size × canvas_size RGB canvas filled with background."""
    placement = fit(image.width, image.height, canvas_size)
    canvas = Image.new('RGB', (canvas_size, canvas_size), hex_to_rgb(background))

    # Round both edges, not the size, so the far edge lands where the real one does
    x = round(placement.offset_x)
    y = round(placement.offset_y)
    w = max(1, round(placement.offset_x + placement.draw_width) - x)
    h = max(1, round(placement.offset_y + placement.draw_height) - y)

    if image.mode in _HIGH_DEPTH_MODES:
        image = _to_8bit(image)

    if image.mode in ('RGBA', 'LA', 'PA') or (image.mode == 'P' and 'transparency' in image.info):
        scaled = image.convert('RGBA').resize((w, h), Image.Resampling.LANCZOS)
        # Transparent pixels show the background, as on a filled canvas
        canvas.paste(scaled, (x, y), mask=scaled.split()[3])
    else:
        scaled = image.convert('RGB').resize((w, h), Image.Resampling.LANCZOS)
        canvas.paste(scaled, (x, y))
    return canvas
