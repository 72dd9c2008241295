# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-06
# Description: CurlVectorTransport
# -----------------------------------------------------------------------------
from __future__ import annotations

import contextlib
import logging
import subprocess
import threading
import time
from typing import List, Optional

from config.Config import Config, DEFAULT_SERVICE_DOMAIN
from utility.errors import TransportError
from utility.logging_utils import get_class_logger

_WRITE_CHUNK = 64 * 1024


class CurlVectorTransport:
    """
    Transport that spawns `curl` for every POST.

    The request body goes to curl's stdin while a single helper thread drains
    its stdout. Writing the whole body before reading anything can deadlock
    once both payloads outgrow the pipe buffers, so the two run concurrently
    and are joined before the exit status is inspected.
    """

    def __init__(
        self,
        cfg: Config,
        *,
        service_domain: str = DEFAULT_SERVICE_DOMAIN,
        curl_bin: str = "curl",
        timeout: Optional[float] = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.cfg = cfg
        self.base_url = cfg.base_url(service_domain)
        self.curl_bin = curl_bin
        self.timeout = timeout
        self.logger = logger or get_class_logger(self.__class__)
        self.logger.info("Initialised curl transport for %s (curl=%s)", self.base_url, curl_bin)

    def build_command(self, url: str) -> List[str]:
        cmd = [
            self.curl_bin,
            "--silent",
            "--show-error",
            "--request", "POST",
            "--header", "Content-Type: application/json",
            "--header", f"Api-Key: {self.cfg.api_key}",
            "--data-binary", "@-",
        ]
        if self.timeout is not None:
            cmd += ["--max-time", str(self.timeout)]
        cmd.append(url)
        return cmd

    def post(self, path: str, body: bytes) -> bytes:
        url = f"{self.base_url}{path}"
        start_time = time.time()
        self.logger.debug("curl POST %s (%d request bytes)", url, len(body))

        try:
            proc = subprocess.Popen(
                self.build_command(url),
                stdin=subprocess.PIPE,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
            )
        except OSError as e:
            raise TransportError(f"Could not start {self.curl_bin!r}", diagnostic=str(e), url=url) from e

        chunks: List[bytes] = []
        drain = threading.Thread(target=self._drain, args=(proc.stdout, chunks), daemon=True)
        drain.start()

        try:
            view = memoryview(body)
            for offset in range(0, len(view), _WRITE_CHUNK):
                proc.stdin.write(view[offset:offset + _WRITE_CHUNK])
            proc.stdin.close()
        except BrokenPipeError:
            # curl gave up before reading everything; its stderr explains why
            self.logger.debug("curl closed stdin early for %s", url)
            with contextlib.suppress(BrokenPipeError):
                proc.stdin.close()

        stderr = proc.stderr.read()
        proc.stderr.close()
        exit_status = proc.wait()
        drain.join()

        elapsed = (time.time() - start_time) * 1000.0
        diagnostic = stderr.decode("utf-8", errors="replace")
        if exit_status != 0:
            self.logger.error(
                "curl POST %s exited with %d after %.1f ms: %s", url, exit_status, elapsed, diagnostic.strip()
            )
            raise TransportError("curl request failed", diagnostic=diagnostic, exit_status=exit_status, url=url)

        raw = b"".join(chunks)
        self.logger.debug("curl POST %s -> %d response bytes (%.1f ms)", url, len(raw), elapsed)
        return raw

    @staticmethod
    def _drain(stream, chunks: List[bytes]) -> None:
        try:
            for chunk in iter(lambda: stream.read(_WRITE_CHUNK), b""):
                chunks.append(chunk)
        finally:
            stream.close()

    def close(self) -> None:
        # Nothing is held between calls
        pass
