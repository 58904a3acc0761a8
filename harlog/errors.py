"""Exceptions raised by the HAR codec."""

from __future__ import annotations


class HARError(Exception):
    """Base class for harlog errors."""


class ParseError(HARError, ValueError):
    """Input is not valid JSON or a value has the wrong wire type."""


class WriteError(HARError, OSError):
    """The encoded document could not be produced or written out."""
