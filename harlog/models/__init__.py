"""Pydantic models for the HAR 1.2 format."""

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
    HARModel,
    HARPage,
    HARPageTimings,
    HARParam,
    HARPostData,
    HARQueryString,
    HARRequest,
    HARResponse,
    HARTimings,
)

__all__ = [
    "HARBrowser",
    "HARCache",
    "HARCacheDetails",
    "HARContent",
    "HARCookie",
    "HARCreator",
    "HAREntry",
    "HARFile",
    "HARHeader",
    "HARLog",
    "HARModel",
    "HARPage",
    "HARPageTimings",
    "HARParam",
    "HARPostData",
    "HARQueryString",
    "HARRequest",
    "HARResponse",
    "HARTimings",
]
