import logging
from dataclasses import dataclass
from typing import Iterable, Iterator

import PIL.ImageOps
from PIL import Image

from .models import Model

logger = logging.getLogger(__name__)


@dataclass
class Page:
    """
    One page as delivered by a page source.

    :ivar int line_count: number of raster lines the page claims to have
    :ivar rows: lazy iterable of packed 1 bit per pixel rows, 1 = black
    :ivar int vertical_resolution: dpi along the label length
    """

    line_count: int
    rows: Iterable[bytes]
    vertical_resolution: int = 300


def _iter_rows(data: bytes, row_len: int) -> Iterator[bytes]:
    for start in range(0, len(data), row_len):
        yield data[start : start + row_len]


def page_from_image(image: Image.Image, model: Model, threshold: float = 70.0, vertical_resolution: int = 300) -> Page:
    """
    Build a page from a Pillow image.

    ``threshold`` (in percent) discriminates between black and white pixels,
    no dithering is applied. Images narrower than
    the print head are placed against its right edge; the rows are mirrored
    because the printer feeds the label head first.
    """
    if image.mode.endswith("A"):
        # place in front of white background and get rid of transparency
        bg = Image.new("RGB", image.size, (255, 255, 255))
        bg.paste(image, image.split()[-1])
        image = bg

    threshold = 100.0 - threshold
    threshold = min(255, max(0, int(threshold / 100.0 * 255)))

    im = image.convert("L")
    if im.size[0] > model.pixel_width:
        logger.warning("Image is %d px wide, only %d px fit on the print head.", im.size[0], model.pixel_width)
    elif im.size[0] < model.pixel_width:
        new_im = Image.new("L", (model.pixel_width, im.size[1]), 255)
        new_im.paste(im, (model.pixel_width - im.size[0], 0))
        im = new_im
    im = PIL.ImageOps.invert(im)
    im = im.point(lambda x: 0 if x < threshold else 255, mode="1")
    im = im.transpose(Image.Transpose.FLIP_LEFT_RIGHT)

    row_len = (im.size[0] + 7) // 8
    data = im.tobytes(encoder_name="raw")
    logger.debug("raster_image_size: {0}x{1}".format(*im.size))
    return Page(line_count=im.size[1], rows=_iter_rows(data, row_len), vertical_resolution=vertical_resolution)
