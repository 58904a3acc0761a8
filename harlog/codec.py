"""HAR codec — decode a HAR document into HARLog, encode HARLog back out.

The wire root is the envelope ``{"log": {...}}``; both directions go through
the HARFile model so field names and optionality come from one place.
"""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import BinaryIO

import orjson
from pydantic import ValidationError

from harlog.config import CodecConfig
from harlog.errors import ParseError, WriteError
from harlog.models.har import HARFile, HARLog

logger = logging.getLogger(__name__)


def _non_finite(value: object, path: str) -> str | None:
    """Return the location of the first NaN or infinite float under value."""
    if isinstance(value, float):
        return None if math.isfinite(value) else path
    if isinstance(value, dict):
        items = value.items()
    elif isinstance(value, list):
        items = enumerate(value)
    else:
        return None
    for key, item in items:
        found = _non_finite(item, f"{path}.{key}")
        if found:
            return found
    return None


def loads(data: bytes | str) -> HARLog:
    """Parse a complete HAR document held in memory."""
    try:
        # only wire names are read; Python attribute names stay custom fields
        envelope = HARFile.model_validate_json(data, by_alias=True, by_name=False)
    except ValidationError as e:
        raise ParseError(f"Invalid HAR document: {e}") from e

    # A document without "log" decodes to an empty log rather than failing
    log = envelope.log if envelope.log is not None else HARLog()
    # custom fields are untyped, so NaN and Infinity can only hide there
    bad = _non_finite(log.model_dump(by_alias=True), "log")
    if bad:
        raise ParseError(f"Invalid HAR document: non-finite number at {bad}")
    logger.debug(
        "Decoded HAR %s with %d entries", log.version or "<no version>", len(log.entries)
    )
    return log


def decode(stream: BinaryIO) -> HARLog:
    """Read a whole HAR document from stream. Raises ParseError on bad input."""
    return loads(stream.read())


def dumps(log: HARLog, config: CodecConfig | None = None) -> bytes:
    """Serialize log inside the ``{"log": ...}`` envelope."""
    config = config or CodecConfig()
    option = 0
    if config.pretty:
        option |= orjson.OPT_INDENT_2
    if config.sort_keys:
        option |= orjson.OPT_SORT_KEYS
    if config.trailing_newline:
        option |= orjson.OPT_APPEND_NEWLINE

    try:
        envelope = HARFile(log=log)
    except ValueError as e:
        raise WriteError(f"Cannot serialize HAR log: {e}") from e

    # values assigned after construction are not validated
    bad = _non_finite(envelope.model_dump(by_alias=True)["log"], "log")
    if bad:
        raise WriteError(f"Cannot serialize HAR log: non-finite number at {bad}")

    try:
        payload = envelope.model_dump(mode="json", by_alias=True, exclude_none=True)
        return orjson.dumps(payload, option=option)
    except (orjson.JSONEncodeError, ValueError, TypeError) as e:
        raise WriteError(f"Cannot serialize HAR log: {e}") from e


def encode(stream: BinaryIO, log: HARLog, config: CodecConfig | None = None) -> None:
    """Write log to stream as an indented HAR document.

    Nothing is rolled back on failure: bytes already written stay in the stream.
    """
    data = dumps(log, config)
    try:
        stream.write(data)
    except (OSError, ValueError) as e:
        # ValueError covers writes to a closed file
        raise WriteError(f"Failed to write HAR document: {e}") from e
    logger.debug("Encoded HAR with %d entries (%d bytes)", len(log.entries), len(data))


def load(path: Path | str) -> HARLog:
    """Decode the HAR file at path."""
    with open(path, "rb") as f:
        return decode(f)


def dump(log: HARLog, path: Path | str, config: CodecConfig | None = None) -> Path:
    """Encode log into the file at path. Returns the file path."""
    filepath = Path(path)
    try:
        f = open(filepath, "wb")
    except OSError as e:
        raise WriteError(f"Cannot open {filepath} for writing: {e}") from e
    with f:
        encode(f, log, config)
    return filepath
