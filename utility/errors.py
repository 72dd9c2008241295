# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-02
# Description: errors.py
# -----------------------------------------------------------------------------
from __future__ import annotations

from typing import Any, Dict, List, Optional


class SymVecError(Exception):
    """Base class for every fatal error raised during an upload or query run."""

    stage = "symvec"


class DecodeError(SymVecError):
    """An input line is not valid JSON or does not match the record shape."""

    stage = "decode"

    def __init__(self, message: str, line_no: int | None = None, source: str | None = None):
        self.line_no = line_no
        self.source = source
        full_message = message
        if source:
            full_message += f" | File: {source}"
        if line_no is not None:
            full_message += f" | Line: {line_no}"
        super().__init__(full_message)


class ConfigError(SymVecError):
    """A required configuration value is absent or malformed."""

    stage = "config"


class TransportError(SymVecError):
    """The HTTP exchange (or the curl process) did not complete successfully."""

    stage = "transport"

    def __init__(
        self,
        message: str,
        diagnostic: str = "",
        exit_status: int | None = None,
        url: str | None = None,
    ):
        self.diagnostic = diagnostic
        self.exit_status = exit_status
        self.url = url
        full_message = message
        if url:
            full_message += f" | URL: {url}"
        if exit_status is not None:
            full_message += f" | Exit status: {exit_status}"
        if diagnostic:
            full_message += f" | {diagnostic.strip()}"
        super().__init__(full_message)


class ServiceError(SymVecError):
    """The vector service answered with its structured error payload."""

    stage = "service"

    def __init__(self, code: int, message: str, details: Optional[List[Dict[str, Any]]] = None):
        self.code = code
        self.message = message
        self.details = list(details or [])
        super().__init__(f"code={code} message={message!r} details={self.details!r}")


class ResponseFormatError(SymVecError):
    """Response bytes matched neither the success nor the service-error shape."""

    stage = "response"

    def __init__(self, message: str, raw: str = ""):
        self.raw = raw
        super().__init__(f"{message} | Raw response: {raw!r}")
