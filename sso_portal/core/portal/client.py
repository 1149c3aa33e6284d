"""Low-level HTTP client for the SSO portal API.

Handles the authorization-code exchange, bearer headers, and HTTP operations.
"""
from __future__ import annotations
import logging
from typing import Any, Callable, Dict, List, Optional, TypeVar

import requests

from sso_portal.config.settings import DEFAULT_REQUEST_TIMEOUT, PortalConfig, portal_base_url
from .exceptions import PortalAPIError, PortalDecodeError, PortalTransportError
from .models import AppInstance, Credentials, Profile

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT = DEFAULT_REQUEST_TIMEOUT

# The portal accepts either spelling depending on deployment; send both.
BEARER_HEADERS = ("x-amz-sso_bearer_token", "x-amz-sso-bearer-token")

T = TypeVar("T")


class SsoClient:
    """HTTP client for the SSO portal bound to one bearer token.

    The token and base URL are fixed at construction, so one instance can be
    shared between threads. Every request goes out on its own connection and
    nothing is retried.

    Usage:
        client = SsoClient.from_auth_code("o-abc123", auth_code, "eu-west-1")
        for instance in client.app_instances():
            profiles = client.profiles(instance.id)
        creds = client.credentials("123456789012", "ReadOnly")
    """

    def __init__(
        self,
        token: str,
        base_url: str,
        request_timeout: float = REQUEST_TIMEOUT,
    ):
        """Initialize a client around an already obtained token.

        Args:
            token: Portal bearer token
            base_url: Portal origin (see ``portal_base_url``)
            request_timeout: Default per-request timeout in seconds
        """
        if not token:
            raise ValueError("SSO portal token must not be empty")
        self._token = token
        self._base_url = base_url.rstrip("/")
        self._request_timeout = request_timeout

    @classmethod
    def from_auth_code(
        cls,
        org_id: str,
        auth_code: str,
        region: str,
        *,
        timeout: Optional[float] = None,
        config: Optional[PortalConfig] = None,
    ) -> "SsoClient":
        """Exchange an authorization code for a token and return a ready client.

        The auth code is single use: the portal consumes it whether or not
        the exchange succeeds.

        Raises:
            PortalTransportError: Portal unreachable
            PortalAPIError: Portal rejected the exchange
            PortalDecodeError: Response is not a token envelope
        """
        config = config or PortalConfig(region=region)
        base_url = portal_base_url(region)
        token = exchange_auth_code(
            base_url,
            org_id,
            auth_code,
            timeout=timeout if timeout is not None else config.request_timeout,
        )
        logger.info("Obtained SSO portal token for region %s", region)
        return cls(token, base_url, request_timeout=config.request_timeout)

    @property
    def token(self) -> str:
        return self._token

    @property
    def base_url(self) -> str:
        return self._base_url

    def _auth_headers(self) -> Dict[str, str]:
        return {name: self._token for name in BEARER_HEADERS}

    def get(self, path: str, params: Optional[Dict[str, str]] = None, timeout: Optional[float] = None) -> requests.Response:
        """Execute an authenticated GET request.

        Args:
            path: API endpoint path (e.g., "/instance/appinstances")
            params: Query parameters
            timeout: Seconds to wait, defaults to the client's request timeout

        Returns:
            Response object with a 2xx status

        Raises:
            PortalTransportError: On network failure
            PortalAPIError: On non-success HTTP status
        """
        url = f"{self._base_url}{path}"
        logger.debug("GET %s", url)
        try:
            resp = requests.get(
                url,
                params=params,
                headers=self._auth_headers(),
                timeout=timeout if timeout is not None else self._request_timeout,
            )
        except requests.RequestException as exc:
            raise PortalTransportError(url, str(exc)) from exc
        _handle_error(resp, url)
        return resp

    def app_instances(self, timeout: Optional[float] = None) -> List[AppInstance]:
        """List app instances visible to this token (first page only)."""
        from .instances import AppInstanceService

        return AppInstanceService(self).list_app_instances(timeout=timeout)

    def profiles(self, app_instance_id: str, timeout: Optional[float] = None) -> List[Profile]:
        """List role profiles of one app instance (first page only)."""
        from .instances import AppInstanceService

        return AppInstanceService(self).list_profiles(app_instance_id, timeout=timeout)

    def credentials(self, account_id: str, role_name: str, timeout: Optional[float] = None) -> Credentials:
        """Exchange an account/role pair for temporary credentials."""
        from .credentials import CredentialService

        return CredentialService(self).get_role_credentials(account_id, role_name, timeout=timeout)


def _handle_error(resp: requests.Response, endpoint: str) -> None:
    """Raise PortalAPIError unless the response status is 2xx."""
    if not 200 <= resp.status_code < 300:
        raise PortalAPIError(resp.status_code, resp.text, endpoint)


def decode_response(resp: requests.Response, endpoint: str, parse: Callable[[Any], T]) -> T:
    """Decode a JSON response body with ``parse``.

    Raises:
        PortalDecodeError: Body is not JSON or ``parse`` rejects its shape
    """
    try:
        payload = resp.json()
    # RecursionError: nesting deeper than the JSON decoder can follow
    except (ValueError, RecursionError) as exc:
        raise PortalDecodeError(endpoint, f"body is not valid JSON ({exc})") from exc
    try:
        return parse(payload)
    except ValueError as exc:
        raise PortalDecodeError(endpoint, str(exc)) from exc


def _token_from_payload(payload: Any) -> str:
    if not isinstance(payload, dict):
        raise ValueError("token response must be a JSON object")
    token = payload.get("token")
    if not isinstance(token, str) or not token:
        raise ValueError("missing required field 'token'")
    return token


def exchange_auth_code(base_url: str, org_id: str, auth_code: str, timeout: float = REQUEST_TIMEOUT) -> str:
    """Trade an authorization code for a portal bearer token.

    The response body carries the token and is never logged.
    """
    url = f"{base_url.rstrip('/')}/auth/sso-token"
    logger.debug("POST %s (org %s)", url, org_id)
    try:
        resp = requests.post(url, data={"authCode": auth_code, "orgId": org_id}, timeout=timeout)
    except requests.RequestException as exc:
        raise PortalTransportError(url, str(exc)) from exc
    _handle_error(resp, url)
    return decode_response(resp, url, _token_from_payload)


def create_client(
    auth_code: str,
    org_id: Optional[str] = None,
    region: Optional[str] = None,
    config: Optional[PortalConfig] = None,
) -> SsoClient:
    """Build a client from settings, with explicit arguments taking priority.

    Args:
        auth_code: Authorization code from the interactive login
        org_id: Identity store / organization id (defaults to config.org_id)
        region: Portal region (defaults to config.region)
        config: Settings, loaded from the environment when omitted

    Raises:
        ValueError: No organization id available
    """
    if config is None:
        from sso_portal.config import load_settings

        config = load_settings()
    org_id = org_id or config.org_id
    if not org_id:
        raise ValueError("An organization id is required (argument or SSO_PORTAL_ORG_ID)")
    region = region or config.region
    return SsoClient.from_auth_code(org_id, auth_code, region, config=config)
