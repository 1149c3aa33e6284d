"""Settings loader for the SSO portal client (environment variables)."""
from __future__ import annotations
import os
from dataclasses import dataclass

DEFAULT_REGION = "us-east-1"
DEFAULT_REQUEST_TIMEOUT = 10.0


@dataclass(frozen=True)
class PortalConfig:
    """Portal client configuration container."""
    region: str = DEFAULT_REGION
    org_id: str = ""
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT

    @property
    def base_url(self) -> str:
        """Portal origin for the configured region."""
        return portal_base_url(self.region)


def portal_base_url(region: str) -> str:
    """Build the portal origin for ``region``.

    The region is interpolated as-is; a malformed value surfaces later as a
    connection failure rather than here.
    """
    return f"https://portal.sso.{region}.amazonaws.com"


def _parse_timeout(raw: str) -> float:
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"SSO_PORTAL_REQUEST_TIMEOUT must be a number, got {raw!r}")
    if value <= 0:
        raise ValueError(f"SSO_PORTAL_REQUEST_TIMEOUT must be positive, got {raw!r}")
    return value


def load_settings() -> PortalConfig:
    """Load portal client settings from environment."""
    region = os.environ.get("SSO_PORTAL_REGION", "").strip() or DEFAULT_REGION
    org_id = os.environ.get("SSO_PORTAL_ORG_ID", "").strip()

    raw_timeout = os.environ.get("SSO_PORTAL_REQUEST_TIMEOUT", "").strip()
    request_timeout = _parse_timeout(raw_timeout) if raw_timeout else DEFAULT_REQUEST_TIMEOUT

    return PortalConfig(
        region=region,
        org_id=org_id,
        request_timeout=request_timeout,
    )
