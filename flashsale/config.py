"""Service configuration read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

DEFAULT_HTTP_HOST = "127.0.0.1"
DEFAULT_HTTP_PORT = 3000


@dataclass(frozen=True)
class Config:
    """Where the server listens and which database it uses."""

    database_url: str
    http_host: str = DEFAULT_HTTP_HOST
    http_port: int = DEFAULT_HTTP_PORT

    @property
    def http_addr(self) -> str:
        """The listening address as ``host:port``."""
        return f"{self.http_host}:{self.http_port}"

    @classmethod
    def from_env(cls) -> Config:
        """Build the configuration, loading a ``.env`` file if one is found.

        Variables already present in the environment take precedence over
        the ``.env`` file.
        """
        dotenv_path = find_dotenv(usecwd=True)
        if dotenv_path:
            load_dotenv(dotenv_path)

        database_url = os.environ.get("DATABASE_URL")
        if database_url is None:
            raise RuntimeError("DATABASE_URL must be set (e.g. in .env)")
        return cls(database_url=database_url)