from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

DEFAULT_API_VERSION = "v60.0"


@dataclass(frozen=True)
class SessionToken:
    """Authorized session returned by the OAuth token endpoint.

    Never mutated; every API call takes it explicitly.
    """

    instance_url: str
    access_token: str
    api_version: str = DEFAULT_API_VERSION

    def __post_init__(self) -> None:
        object.__setattr__(self, "instance_url", self.instance_url.rstrip("/"))

    @classmethod
    def from_payload(
        cls, payload: Mapping[str, Any], api_version: str = DEFAULT_API_VERSION
    ) -> SessionToken:
        """Build a token from an OAuth response body."""
        return cls(
            instance_url=payload["instance_url"],
            access_token=payload["access_token"],
            api_version=api_version,
        )

    def with_api_version(self, api_version: str) -> SessionToken:
        return SessionToken(self.instance_url, self.access_token, api_version)
