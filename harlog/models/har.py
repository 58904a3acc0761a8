"""HAR (HTTP Archive) format models — HAR 1.2 spec.

http://www.softwareishard.com/blog/har-12-spec/

Optional fields default to ``None`` and are left out of the output on encode.
Durations are milliseconds, timestamps are ISO-8601 on the wire.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class HARModel(BaseModel):
    """Base for every HAR record.

    Wire types must match exactly (no coercion of ``"200"`` to ``200``) and
    custom fields such as ``_initiator`` are carried through untouched.
    """

    model_config = {
        "validate_by_name": True,
        "validate_by_alias": True,
        "strict": True,
        "allow_inf_nan": False,
        "extra": "allow",
    }


class HARCreator(HARModel):
    name: str = ""
    version: str = ""
    comment: str | None = None


class HARBrowser(HARCreator):
    """Same shape as the creator, describes the browser instead of the tool."""


class HARPageTimings(HARModel):
    on_content_load: float | None = Field(alias="onContentLoad", default=None)
    on_load: float | None = Field(alias="onLoad", default=None)
    comment: str | None = None


class HARPage(HARModel):
    started_date_time: datetime | None = Field(alias="startedDateTime", default=None)
    id: str = ""
    title: str = ""
    page_timings: HARPageTimings = Field(alias="pageTimings", default_factory=HARPageTimings)
    comment: str | None = None


class HARCookie(HARModel):
    name: str = ""
    value: str = ""
    path: str | None = None
    domain: str | None = None
    expires: datetime | None = None
    http_only: bool = Field(alias="httpOnly", default=False)
    secure: bool = False
    comment: str | None = None


class HARHeader(HARModel):
    name: str = ""
    value: str = ""
    comment: str | None = None


class HARQueryString(HARModel):
    name: str = ""
    value: str = ""
    comment: str | None = None


class HARParam(HARModel):
    name: str = ""
    value: str | None = None
    file_name: str | None = Field(alias="fileName", default=None)
    content_type: str | None = Field(alias="contentType", default=None)
    comment: str | None = None


class HARPostData(HARModel):
    mime_type: str | None = Field(alias="mimeType", default=None)
    params: list[HARParam] = Field(default_factory=list)
    text: str = ""
    comment: str | None = None


class HARRequest(HARModel):
    method: str = ""
    url: str = ""
    http_version: str = Field(alias="httpVersion", default="")
    cookies: list[HARCookie] = Field(default_factory=list)
    headers: list[HARHeader] = Field(default_factory=list)
    query_string: list[HARQueryString] = Field(alias="queryString", default_factory=list)
    post_data: HARPostData | None = Field(alias="postData", default=None)
    headers_size: int = Field(alias="headersSize", default=0)
    body_size: int = Field(alias="bodySize", default=0)
    comment: str | None = None


class HARContent(HARModel):
    # text may be missing even when size is nonzero (body not captured)
    size: int = 0
    compression: int = 0
    mime_type: str | None = Field(alias="mimeType", default=None)
    text: str | None = None
    encoding: str | None = None
    comment: str | None = None


class HARResponse(HARModel):
    status: int = 0
    status_text: str = Field(alias="statusText", default="")
    http_version: str = Field(alias="httpVersion", default="")
    cookies: list[HARCookie] = Field(default_factory=list)
    headers: list[HARHeader] = Field(default_factory=list)
    content: HARContent = Field(default_factory=HARContent)
    redirect_url: str = Field(alias="redirectURL", default="")
    headers_size: int = Field(alias="headersSize", default=0)
    body_size: int = Field(alias="bodySize", default=0)
    comment: str | None = None


class HARCacheDetails(HARModel):
    expires: datetime | None = None
    last_access: datetime | None = Field(alias="lastAccess", default=None)
    etag: str = Field(alias="eTag", default="")
    hit_count: int = Field(alias="hitCount", default=0, ge=0)
    comment: str | None = None


class HARCache(HARModel):
    before_request: HARCacheDetails | None = Field(alias="beforeRequest", default=None)
    after_request: HARCacheDetails | None = Field(alias="afterRequest", default=None)
    comment: str | None = None


class HARTimings(HARModel):
    """Per-phase timings of an entry.

    ``blocked``, ``dns``, ``connect`` and ``ssl`` are ``None`` when the
    timing is not available; HAR uses ``-1`` for "does not apply".
    ``send``, ``wait`` and ``receive`` are always written.
    """

    blocked: float | None = None
    dns: float | None = None
    connect: float | None = None
    send: float = 0
    wait: float = 0
    receive: float = 0
    ssl: float | None = None
    comment: str | None = None


class HAREntry(HARModel):
    pageref: str | None = None
    started_date_time: datetime | None = Field(alias="startedDateTime", default=None)
    time: float = 0
    request: HARRequest = Field(default_factory=HARRequest)
    response: HARResponse = Field(default_factory=HARResponse)
    cache: HARCache | None = None
    timings: HARTimings = Field(default_factory=HARTimings)
    server_ip_address: str | None = Field(alias="serverIPAddress", default=None)
    connection: str | None = None
    comment: str | None = None


class HARLog(HARModel):
    version: str = ""
    creator: HARCreator = Field(default_factory=HARCreator)
    browser: HARBrowser | None = None
    pages: list[HARPage] | None = None
    entries: list[HAREntry] = Field(default_factory=list)
    comment: str | None = None


class HARFile(HARModel):
    """Top-level HAR document: ``{"log": {...}}``."""

    # None only for "log": null; decode reads that as an empty log
    log: HARLog | None = Field(default_factory=HARLog)
