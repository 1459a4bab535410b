"""Image → base64 text for the JSON request body."""
import asyncio
import base64
import logging
import os
from pathlib import Path
from typing import Union

from owlverload_client.constants import (
    DATA_URL_SCHEME,
    DATA_URL_SEPARATOR,
    MSG_BAD_DATA_URL,
    MSG_EMPTY_IMAGE,
    MSG_IMAGE_UNREADABLE,
)
from owlverload_client.errors import ValidationError

logger = logging.getLogger(__name__)

ImageSource = Union[bytes, bytearray, str, os.PathLike]


def _strip_data_url(data_url: str) -> str:
    match data_url.partition(DATA_URL_SEPARATOR):
        case (_, "", _):
            raise ValidationError(MSG_BAD_DATA_URL)
        case (_, _, ""):
            raise ValidationError(MSG_EMPTY_IMAGE)
        case (_, _, encoded):
            return encoded


async def _read_file(path: Path) -> bytes:
    try:
        return await asyncio.to_thread(path.read_bytes)
    except OSError as e:
        logger.warning(f"Image read failed: {e}")
        raise ValidationError(MSG_IMAGE_UNREADABLE % e) from e


async def to_base64(image: ImageSource | None) -> str:
    """Return ``image`` as standard base64 text.

    ``image`` may be raw bytes, a data URL (its ``data:...,`` prefix is
    dropped) or a path to a file, which is read off the event loop.
    """
    match image:
        case None | b"" | "":
            raise ValidationError(MSG_EMPTY_IMAGE)
        case bytes() | bytearray():
            raw = bytes(image)
        case str() if image.startswith(DATA_URL_SCHEME):
            return _strip_data_url(image)
        case str() | os.PathLike():
            raw = await _read_file(Path(image))
        case _:
            raise ValidationError(MSG_EMPTY_IMAGE)

    match raw:
        case b"":
            raise ValidationError(MSG_EMPTY_IMAGE)
        case _:
            return base64.standard_b64encode(raw).decode()
