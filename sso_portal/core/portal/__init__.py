"""SSO portal API client library.

Architecture:
- client.py: HTTP client, auth code exchange and bearer headers
- instances.py: App instance and role profile listing
- credentials.py: Account/role credential exchange
- models.py: Wire representations and the client-facing Credentials value
- naming.py: Account id/name extraction from app instance names
- exceptions.py: Typed exceptions for error handling

Usage:
    from sso_portal.core.portal import SsoClient

    client = SsoClient.from_auth_code(org_id, auth_code, "eu-west-1")
    for instance in client.app_instances():
        print(instance.account_id, instance.account_name)
    creds = client.credentials("123456789012", "ReadOnly")
"""
from .client import (
    SsoClient,
    BEARER_HEADERS,
    REQUEST_TIMEOUT,
    create_client,
    exchange_auth_code,
)
from .credentials import CredentialService
from .exceptions import (
    PortalError,
    PortalTransportError,
    PortalAPIError,
    PortalDecodeError,
)
from .instances import AppInstanceService
from .models import (
    AppInstance,
    Credentials,
    Page,
    Profile,
    RoleCredentials,
    SearchMetadata,
)
from .naming import account_id, account_name

__all__ = [
    # Client
    "SsoClient",
    "BEARER_HEADERS",
    "REQUEST_TIMEOUT",
    "create_client",
    "exchange_auth_code",

    # Exceptions
    "PortalError",
    "PortalTransportError",
    "PortalAPIError",
    "PortalDecodeError",

    # Services
    "AppInstanceService",
    "CredentialService",

    # Models
    "AppInstance",
    "Credentials",
    "Page",
    "Profile",
    "RoleCredentials",
    "SearchMetadata",

    # Name parsing
    "account_id",
    "account_name",
]
