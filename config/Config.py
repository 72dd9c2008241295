# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-02
# Description: Config
# -----------------------------------------------------------------------------

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv, find_dotenv

from utility.errors import ConfigError

# Load .env once globally; real environment variables take precedence
load_dotenv(find_dotenv(usecwd=True), override=False)

DEFAULT_SERVICE_DOMAIN = "pinecone.io"


@dataclass(frozen=True)
class Config:
    # Pinecone index addressing
    api_key: str
    project: str
    index: str
    environment: str

    # ---- Single source of truth: field_name -> ENV VAR NAME ----
    ENV_VARS = {
        "api_key": "PINECONE_API_KEY",
        "project": "PINECONE_PROJECT",
        "index": "PINECONE_INDEX",
        "environment": "PINECONE_ENVIRONMENT",
    }

    @staticmethod
    def from_env(**overrides: Optional[str]) -> "Config":
        """
        Build Config from environment variables.

        Explicit (non-empty) keyword overrides win over the environment, so CLI
        flags can be passed straight through.
        """
        unknown = set(overrides) - set(Config.ENV_VARS)
        if unknown:
            raise ConfigError(f"Unknown config fields: {sorted(unknown)}")

        kwargs = {}
        for field_name, env_name in Config.ENV_VARS.items():
            explicit = overrides.get(field_name)
            if explicit:
                kwargs[field_name] = explicit.strip()
            else:
                kwargs[field_name] = (os.getenv(env_name) or "").strip()
        return Config(**kwargs)

    def __post_init__(self):
        """Fail fast if any required config is missing."""
        missing_fields = [k for k, v in self.__dict__.items() if not v]

        if missing_fields:
            missing_env_vars = [self.ENV_VARS[f] for f in missing_fields]
            raise ConfigError(f"Missing required environment variables: {missing_env_vars}")

    def service_host(self, domain: str = DEFAULT_SERVICE_DOMAIN) -> str:
        """Index endpoint host, e.g. 'symbols-abc123.svc.us-west1-gcp.pinecone.io'."""
        return f"{self.index}-{self.project}.svc.{self.environment}.{domain}"

    def base_url(self, domain: str = DEFAULT_SERVICE_DOMAIN) -> str:
        return f"https://{self.service_host(domain)}"

    def summary(self) -> dict:
        """Return a safe, non-sensitive summary for logging."""
        return {
            "project": self.project,
            "index": self.index,
            "environment": self.environment,
            "api_key_set": bool(self.api_key),
        }
