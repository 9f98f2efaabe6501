"""Image metadata extraction utilities."""

from __future__ import annotations

import asyncio
import logging
import os
import re
from io import BytesIO
from pathlib import Path
from typing import Iterable, Optional, Tuple

from bs4 import BeautifulSoup
from filetype import guess
from PIL import Image

from .models import BatchResult, FileFailure, ImageDecodeError, ImageRecord
from .utils import parse_pixel_length

logger = logging.getLogger("react_image_analyzer")

# Only image headers are read here; pixel data is never decoded.
Image.MAX_IMAGE_PIXELS = None

SVG_ROOT_PATTERN = re.compile(rb"<svg[\s>/]", re.IGNORECASE)
VIEWBOX_SEPARATOR = re.compile(r"[\s,]+")


def detect_image_format(data: bytes) -> Optional[str]:
    """Detect image type from its signature; returns a lowercase extension."""
    kind = guess(data)
    if kind and kind.mime.startswith("image/"):
        return kind.extension.lower()
    if SVG_ROOT_PATTERN.search(data):
        return "svg"
    return None


def read_svg_dimensions(data: bytes) -> Tuple[Optional[int], Optional[int]]:
    """Read the intrinsic size of an SVG document.

    ``width``/``height`` in px (or unitless) win; anything missing or given in
    another unit falls back to the ``viewBox`` size, and stays None without one.
    """
    soup = BeautifulSoup(data.decode("utf-8", errors="replace"), "html.parser")
    root = soup.find("svg")
    if root is None:
        raise ImageDecodeError("No <svg> root element")

    width = parse_pixel_length(root.get("width"))
    height = parse_pixel_length(root.get("height"))
    viewbox = root.get("viewbox")
    if (width is None or height is None) and viewbox:
        parts = VIEWBOX_SEPARATOR.split(viewbox.strip())
        if len(parts) == 4:
            try:
                box_width, box_height = float(parts[2]), float(parts[3])
            except ValueError:
                logger.debug("Ignoring malformed viewBox %r", viewbox)
            else:
                width = round(box_width) if width is None else width
                height = round(box_height) if height is None else height
    return width, height


def _read_raster_metadata(data: bytes) -> Tuple[int, int, str]:
    with Image.open(BytesIO(data)) as image:
        width, height = image.size
        image_format = image.format
    if not image_format:
        raise ImageDecodeError("Decoder did not report a format")
    return width, height, image_format.lower()


def read_image_metadata(path: str) -> ImageRecord:
    """Return size, dimensions and format for one image file."""
    byte_size = os.stat(path).st_size
    if byte_size == 0:
        raise ImageDecodeError("Empty file")

    data = Path(path).read_bytes()
    detected = detect_image_format(data)
    if detected is None:
        raise ImageDecodeError("Unrecognised image signature")

    if detected == "svg":
        width, height = read_svg_dimensions(data)
        image_format = "svg"
    else:
        width, height, image_format = _read_raster_metadata(data)

    return ImageRecord(
        path=path,
        byte_size=byte_size,
        width=width,
        height=height,
        format=image_format,
    )


async def extract_image_metadata(path: str) -> ImageRecord:
    """Read image metadata off the event loop."""
    return await asyncio.to_thread(read_image_metadata, path)


async def analyze_images(image_paths: Iterable[str]) -> BatchResult[ImageRecord]:
    """Extract metadata for each image in order, one file at a time."""
    result: BatchResult[ImageRecord] = BatchResult()
    for image_path in image_paths:
        try:
            record = await extract_image_metadata(image_path)
        except (OSError, ImageDecodeError) as exc:
            logger.error("Error processing image %s: %s", image_path, exc)
            result.failures.append(FileFailure(image_path, str(exc)))
            continue
        except Exception as exc:  # pylint: disable=broad-except
            logger.exception("Unexpected error processing image %s", image_path)
            result.failures.append(FileFailure(image_path, repr(exc)))
            continue
        result.items.append(record)
    return result
