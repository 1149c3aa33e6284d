"""Role credential exchange."""
from __future__ import annotations
import logging
from typing import Any, Optional

from .client import SsoClient, decode_response
from .models import Credentials, RoleCredentials

logger = logging.getLogger(__name__)


def _credentials_from_payload(payload: Any) -> Credentials:
    return RoleCredentials.from_envelope(payload).to_credentials()


class CredentialService:
    """Service for exchanging an account/role pair for temporary credentials."""

    def __init__(self, client: SsoClient):
        self.client = client

    def get_role_credentials(self, account_id: str, role_name: str, timeout: Optional[float] = None) -> Credentials:
        """Request temporary credentials for ``role_name`` in ``account_id``.

        The response body contains secrets and is not logged. Expiry is
        converted to an absolute time but never checked here.

        Raises:
            PortalTransportError, PortalAPIError, PortalDecodeError
        """
        logger.debug("Requesting credentials for account: %s, role: %s", account_id, role_name)
        params = {
            "account_id": account_id,
            "role_name": role_name,
            "debug": "true",
        }
        path = "/federation/credentials/"
        resp = self.client.get(path, params=params, timeout=timeout)
        return decode_response(resp, f"{self.client.base_url}{path}", _credentials_from_payload)
