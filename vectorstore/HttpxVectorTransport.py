# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-05
# Description: HttpxVectorTransport
# -----------------------------------------------------------------------------
from __future__ import annotations

import logging
import time
from typing import Optional

import httpx

from config.Config import Config, DEFAULT_SERVICE_DOMAIN
from utility.errors import TransportError
from utility.logging_utils import get_class_logger


class HttpxVectorTransport:
    """
    Native HTTPS transport built on httpx.

    The response body is consumed as a stream so large answers are drained as
    they arrive rather than buffered by the client first.
    """

    def __init__(
        self,
        cfg: Config,
        *,
        service_domain: str = DEFAULT_SERVICE_DOMAIN,
        timeout: Optional[float] = None,
        transport: httpx.BaseTransport | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.cfg = cfg
        self.base_url = cfg.base_url(service_domain)
        self.logger = logger or get_class_logger(self.__class__)

        self.client = httpx.Client(
            base_url=self.base_url,
            headers={
                "Api-Key": cfg.api_key,
                "Content-Type": "application/json",
            },
            timeout=httpx.Timeout(timeout),
            transport=transport,
        )
        self.logger.info("Initialised httpx transport for %s (timeout=%s)", self.base_url, timeout)

    def post(self, path: str, body: bytes) -> bytes:
        url = f"{self.base_url}{path}"
        start_time = time.time()
        self.logger.debug("POST %s (%d request bytes)", url, len(body))

        try:
            with self.client.stream("POST", path, content=body) as resp:
                raw = b"".join(resp.iter_bytes())
                status = resp.status_code
        except httpx.RequestError as e:
            elapsed = (time.time() - start_time) * 1000.0
            self.logger.error("POST %s failed after %.1f ms: %s", url, elapsed, e)
            raise TransportError("HTTP request failed", diagnostic=str(e), url=url) from e

        elapsed = (time.time() - start_time) * 1000.0
        self.logger.debug(
            "POST %s -> HTTP %d, %d response bytes (%.1f ms)", url, status, len(raw), elapsed
        )
        if status >= 400:
            # Body still goes to the classifier; service errors carry a JSON payload
            self.logger.warning("POST %s returned HTTP %d", url, status)
        return raw

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> "HttpxVectorTransport":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
