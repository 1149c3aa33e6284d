"""Portal response representations.

The portal speaks camelCase JSON (PascalCase inside ``searchMetadata``).
Each type here knows how to build itself from the decoded wire payload via
``from_dict``; a missing or mistyped required field raises ``ValueError``,
which the services turn into ``PortalDecodeError``.

Usage:
    page = Page.from_dict(resp.json(), AppInstance.from_dict)
    for instance in page.result:
        print(instance.account_id, instance.account_name)
"""
from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar

from . import naming

T = TypeVar("T")

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
PROVIDER_NAME = "sso-portal"


def _require_object(data: Any, what: str) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise ValueError(f"{what} must be a JSON object, got {type(data).__name__}")
    return data


def _require_str(data: Dict[str, Any], key: str) -> str:
    if key not in data:
        raise ValueError(f"missing required field '{key}'")
    value = data[key]
    if not isinstance(value, str):
        raise ValueError(f"field '{key}' must be a string")
    return value


def _optional_str(data: Dict[str, Any], key: str) -> Optional[str]:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"field '{key}' must be a string")
    return value


def _require_int(data: Dict[str, Any], key: str) -> int:
    if key not in data:
        raise ValueError(f"missing required field '{key}'")
    value = data[key]
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"field '{key}' must be an integer")
    return value


def _from_epoch_millis(millis: int) -> datetime:
    if millis < 0:
        raise ValueError(f"timestamp must not be negative, got {millis}")
    try:
        return EPOCH + timedelta(milliseconds=millis)
    except OverflowError:
        raise ValueError(f"timestamp out of range, got {millis}")


def _require_epoch_millis(data: Dict[str, Any], key: str) -> int:
    value = _require_int(data, key)
    try:
        _from_epoch_millis(value)
    except ValueError as exc:
        raise ValueError(f"field '{key}': {exc}") from exc
    return value


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of a list endpoint.

    ``pagination_token`` is set when the portal has more results than it
    returned in this response.
    """
    result: List[T]
    pagination_token: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any, item_from_dict: Callable[[Dict[str, Any]], T]) -> "Page[T]":
        data = _require_object(data, "page")
        if "result" not in data:
            raise ValueError("missing required field 'result'")
        items = data["result"]
        if not isinstance(items, list):
            raise ValueError("field 'result' must be a list")
        result = []
        for index, item in enumerate(items):
            try:
                result.append(item_from_dict(_require_object(item, "entry")))
            except ValueError as exc:
                raise ValueError(f"result[{index}]: {exc}") from exc
        return cls(result=result, pagination_token=_optional_str(data, "paginationToken"))


@dataclass(frozen=True)
class SearchMetadata:
    """Account details attached to instances returned by search queries."""
    account_id: str
    account_name: str
    account_email: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SearchMetadata":
        return cls(
            account_id=_require_str(data, "AccountId"),
            account_name=_require_str(data, "AccountName"),
            account_email=_require_str(data, "AccountEmail"),
        )


@dataclass(frozen=True)
class AppInstance:
    """Application registered with the identity provider.

    For cloud-account applications ``name`` usually embeds the account id
    and, in parentheses, the account's display name.
    """
    id: str
    name: str
    description: str
    application_id: str
    application_name: str
    icon: str
    search_metadata: Optional[SearchMetadata] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppInstance":
        metadata = data.get("searchMetadata")
        return cls(
            id=_require_str(data, "id"),
            name=_require_str(data, "name"),
            description=_require_str(data, "description"),
            application_id=_require_str(data, "applicationId"),
            application_name=_require_str(data, "applicationName"),
            icon=_require_str(data, "icon"),
            search_metadata=(
                SearchMetadata.from_dict(_require_object(metadata, "searchMetadata"))
                if metadata is not None
                else None
            ),
        )

    @property
    def account_name(self) -> Optional[str]:
        return naming.account_name(self.name)

    @property
    def account_id(self) -> Optional[str]:
        return naming.account_id(self.name)


@dataclass(frozen=True)
class Profile:
    """Role exposed by an app instance."""
    id: str
    name: str
    description: str
    url: str
    protocol: str
    relay_state: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Profile":
        return cls(
            id=_require_str(data, "id"),
            name=_require_str(data, "name"),
            description=_require_str(data, "description"),
            url=_require_str(data, "url"),
            protocol=_require_str(data, "protocol"),
            relay_state=_optional_str(data, "relayState"),
        )


@dataclass(frozen=True)
class Credentials:
    """Temporary cloud credentials handed to the rest of the system.

    Secrets are excluded from ``repr`` so instances can be logged safely.
    The client never checks ``expiration``; that is left to the consumer.
    """
    access_key_id: str
    secret_access_key: str = field(repr=False)
    session_token: str = field(repr=False)
    expiration: datetime
    provider_name: str = PROVIDER_NAME


@dataclass(frozen=True)
class RoleCredentials:
    """Credentials exactly as the portal returns them.

    ``expiration`` is epoch milliseconds. Use ``to_credentials`` to obtain the
    client-facing ``Credentials`` value.
    """
    access_key_id: str
    secret_access_key: str = field(repr=False)
    session_token: str = field(repr=False)
    expiration: int

    @classmethod
    def from_envelope(cls, data: Any) -> "RoleCredentials":
        """Decode ``{"roleCredentials": {...}}``."""
        data = _require_object(data, "response")
        if "roleCredentials" not in data:
            raise ValueError("missing required field 'roleCredentials'")
        inner = _require_object(data["roleCredentials"], "roleCredentials")
        return cls(
            access_key_id=_require_str(inner, "accessKeyId"),
            secret_access_key=_require_str(inner, "secretAccessKey"),
            session_token=_require_str(inner, "sessionToken"),
            expiration=_require_epoch_millis(inner, "expiration"),
        )

    def to_credentials(self) -> Credentials:
        return Credentials(
            access_key_id=self.access_key_id,
            secret_access_key=self.secret_access_key,
            session_token=self.session_token,
            expiration=_from_epoch_millis(self.expiration),
        )
