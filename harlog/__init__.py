"""harlog — HAR 1.2 (HTTP Archive) models with a JSON decode/encode codec."""

from harlog.codec import decode, dump, dumps, encode, load, loads
from harlog.config import CodecConfig, load_config
from harlog.errors import HARError, ParseError, WriteError
from harlog.models.har import (
    HARBrowser,
    HARCache,
    HARCacheDetails,
    HARContent,
    HARCookie,
    HARCreator,
    HAREntry,
    HARFile,
    HARHeader,
    HARLog,
    HARPage,
    HARPageTimings,
    HARParam,
    HARPostData,
    HARQueryString,
    HARRequest,
    HARResponse,
    HARTimings,
)

__version__ = "0.1.0"

__all__ = [
    "CodecConfig",
    "HARBrowser",
    "HARCache",
    "HARCacheDetails",
    "HARContent",
    "HARCookie",
    "HARCreator",
    "HAREntry",
    "HARError",
    "HARFile",
    "HARHeader",
    "HARLog",
    "HARPage",
    "HARPageTimings",
    "HARParam",
    "HARPostData",
    "HARQueryString",
    "HARRequest",
    "HARResponse",
    "HARTimings",
    "ParseError",
    "WriteError",
    "decode",
    "dump",
    "dumps",
    "encode",
    "load",
    "load_config",
    "loads",
]
