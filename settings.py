# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-02
# Description: settings.py
# -----------------------------------------------------------------------------
import os
from typing import Optional

from utility.errors import ConfigError


def _env(name: str, default: str = "") -> str:
    """Read env var safely and strip whitespace."""
    return (os.getenv(name) or default).strip()


def _env_int(name: str, default: int) -> int:
    v = _env(name, "")
    if v == "":
        return default
    try:
        return int(v)
    except ValueError as e:
        raise ConfigError(f"Env var {name} must be an int, got {v!r}") from e


def _env_float(name: str, default: Optional[float]) -> Optional[float]:
    v = _env(name, "")
    if v == "":
        return default
    try:
        return float(v)
    except ValueError as e:
        raise ConfigError(f"Env var {name} must be a float, got {v!r}") from e


# -----------------------------------------------------------------------------
# Batching / partitions
# -----------------------------------------------------------------------------
BATCH_SIZE = _env_int("SYM_BATCH_SIZE", 100)

NAME_NAMESPACE = _env("SYM_NAME_NAMESPACE", "name")
TYPE_NAMESPACE = _env("SYM_TYPE_NAMESPACE", "type")

# Which hash becomes the vector id in the "type" namespace.
# Historical uploads used the name hash for both namespaces; keep that unless told otherwise.
TYPE_ID_SOURCE = _env("SYM_TYPE_ID_SOURCE", "name_hash").lower()


# -----------------------------------------------------------------------------
# Transport
# -----------------------------------------------------------------------------
SERVICE_DOMAIN = _env("SYM_SERVICE_DOMAIN", "pinecone.io")

# "httpx" (native client) or "curl" (spawned process)
TRANSPORT = _env("SYM_TRANSPORT", "httpx").lower()

# Unset means no timeout: a hung call blocks the run
HTTP_TIMEOUT = _env_float("SYM_HTTP_TIMEOUT", None)

CURL_BIN = _env("SYM_CURL_BIN", "curl")


# -----------------------------------------------------------------------------
# Sanity checks
# -----------------------------------------------------------------------------
if BATCH_SIZE < 1:
    raise ConfigError(f"SYM_BATCH_SIZE must be >= 1, got {BATCH_SIZE}")

if TYPE_ID_SOURCE not in ("name_hash", "type_hash"):
    raise ConfigError(f"SYM_TYPE_ID_SOURCE must be 'name_hash' or 'type_hash', got {TYPE_ID_SOURCE!r}")

if TRANSPORT not in ("httpx", "curl"):
    raise ConfigError(f"SYM_TRANSPORT must be 'httpx' or 'curl', got {TRANSPORT!r}")
