from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests

from .exceptions import AuthFlowError, MissingCredentialsError
from .session import SessionToken

_logger = logging.getLogger(__name__)


# ----------------------------------------------------------------------
# Configuration dataclass
# ----------------------------------------------------------------------
@dataclass
class SFConfig:
    """Configuration for Salesforce API authentication."""

    # "client_credentials" (Connected App) or "password" (username/password + security token)
    auth_flow: str = "client_credentials"

    # Base login URL (not the instance URL)
    login_url: str = "https://login.salesforce.com"

    client_id: Optional[str] = None
    client_secret: Optional[str] = None

    username: Optional[str] = None
    password: Optional[str] = None
    security_token: Optional[str] = None

    # Optional: pre-provided token / instance URL skip the OAuth round trip
    access_token: Optional[str] = None
    instance_url: Optional[str] = None

    # Optional: override API version (e.g. "v60.0"); otherwise auto-discover
    api_version: Optional[str] = None

    @classmethod
    def from_env(cls) -> SFConfig:
        """Load configuration from environment variables."""
        return cls(
            auth_flow=os.getenv("SF_AUTH_FLOW", "client_credentials"),
            login_url=os.getenv("SF_LOGIN_URL", "https://login.salesforce.com"),
            client_id=os.getenv("SF_CLIENT_ID"),
            client_secret=os.getenv("SF_CLIENT_SECRET"),
            username=os.getenv("SF_USERNAME"),
            password=os.getenv("SF_PASSWORD"),
            security_token=os.getenv("SF_SECURITY_TOKEN"),
            access_token=os.getenv("SF_ACCESS_TOKEN"),
            instance_url=os.getenv("SF_INSTANCE_URL"),
            api_version=os.getenv("SF_API_VERSION"),
        )


# ----------------------------------------------------------------------
# Login
# ----------------------------------------------------------------------
def _require(settings: Dict[str, Optional[str]]) -> None:
    missing = [k for k, v in settings.items() if not v]
    if missing:
        raise MissingCredentialsError(missing)


def _token_request(
    cfg: SFConfig, data: Dict[str, Any], session: requests.Session
) -> Dict[str, Any]:
    token_url = f"{cfg.login_url.rstrip('/')}/services/oauth2/token"
    _logger.debug("Requesting access token from %s (%s)", token_url, data["grant_type"])
    r = session.post(token_url, data=data, timeout=30.0)
    if r.status_code >= 400:
        try:
            detail = r.json()
        except ValueError:
            detail = r.text
        _logger.error("Token request failed (%s): %s", r.status_code, detail)
        r.raise_for_status()
    return r.json()


def _client_credentials_login(cfg: SFConfig, session: requests.Session) -> Dict[str, Any]:
    _require(
        {
            "SF_CLIENT_ID": cfg.client_id,
            "SF_CLIENT_SECRET": cfg.client_secret,
            "SF_LOGIN_URL": cfg.login_url,
        }
    )
    return _token_request(
        cfg,
        {
            "grant_type": "client_credentials",
            "client_id": cfg.client_id,
            "client_secret": cfg.client_secret,
        },
        session,
    )


def _password_login(cfg: SFConfig, session: requests.Session) -> Dict[str, Any]:
    _require(
        {
            "SF_CLIENT_ID": cfg.client_id,
            "SF_CLIENT_SECRET": cfg.client_secret,
            "SF_USERNAME": cfg.username,
            "SF_PASSWORD": cfg.password,
        }
    )
    return _token_request(
        cfg,
        {
            "grant_type": "password",
            "client_id": cfg.client_id,
            "client_secret": cfg.client_secret,
            "username": cfg.username,
            "password": f"{cfg.password}{cfg.security_token or ''}",
        },
        session,
    )


_FLOWS = {
    "client_credentials": _client_credentials_login,
    "password": _password_login,
}


def discover_latest_api_version(
    instance_url: str, access_token: str, session: requests.Session
) -> str:
    """Find the latest API version the instance offers (e.g. ``v60.0``)."""
    r = session.get(
        f"{instance_url.rstrip('/')}/services/data/",
        headers={"Authorization": f"Bearer {access_token}"},
        timeout=30.0,
    )
    r.raise_for_status()
    versions = r.json()
    best = max(versions, key=lambda v: float(v.get("version", "0")))
    version_str = best.get("url", "").rstrip("/").split("/")[-1]
    _logger.debug("Latest API version discovered: %s", version_str)
    return version_str


def login(
    cfg: Optional[SFConfig] = None, session: Optional[requests.Session] = None
) -> SessionToken:
    """Return a :class:`SessionToken` for the configured org."""
    cfg = cfg or SFConfig.from_env()
    session = session or requests.Session()

    if cfg.access_token and cfg.instance_url:
        _logger.debug("Using existing access token from configuration.")
        access_token, instance_url = cfg.access_token, cfg.instance_url
    else:
        flow = _FLOWS.get(cfg.auth_flow)
        if flow is None:
            raise AuthFlowError(cfg.auth_flow)
        _logger.info("Performing OAuth login using auth flow: %s", cfg.auth_flow)
        payload = flow(cfg, session)
        access_token, instance_url = payload["access_token"], payload["instance_url"]

    api_version = cfg.api_version or discover_latest_api_version(instance_url, access_token, session)
    token = SessionToken(instance_url=instance_url, access_token=access_token, api_version=api_version)
    _logger.info("Connected to Salesforce instance=%s api=%s", token.instance_url, api_version)
    return token
