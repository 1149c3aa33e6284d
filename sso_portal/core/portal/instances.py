"""App instance and profile listing."""
from __future__ import annotations
import logging
from typing import Any, Callable, Dict, List, Optional, TypeVar
from urllib.parse import quote

from .client import SsoClient, decode_response
from .models import AppInstance, Page, Profile

logger = logging.getLogger(__name__)

T = TypeVar("T")


class AppInstanceService:
    """Service for listing portal app instances and their role profiles.

    Only the first page of each listing is fetched. When the portal reports
    more pages, a warning is logged and the remaining pages are not requested.
    """

    def __init__(self, client: SsoClient):
        """Initialize app instance service.

        Args:
            client: Authenticated portal client
        """
        self.client = client

    def _first_page(
        self,
        path: str,
        item_from_dict: Callable[[Dict[str, Any]], T],
        timeout: Optional[float],
    ) -> List[T]:
        resp = self.client.get(path, timeout=timeout)
        logger.debug("Received %s", resp.text)
        page = decode_response(resp, f"{self.client.base_url}{path}", lambda payload: Page.from_dict(payload, item_from_dict))
        if page.pagination_token:
            logger.warning("%s returned more than one page; only the first page is used", path)
        return page.result

    def list_app_instances(self, timeout: Optional[float] = None) -> List[AppInstance]:
        """List app instances registered with the identity provider.

        Args:
            timeout: Seconds to wait for the portal

        Returns:
            App instances in the order the portal returned them

        Raises:
            PortalTransportError, PortalAPIError, PortalDecodeError
        """
        instances = self._first_page("/instance/appinstances", AppInstance.from_dict, timeout)
        logger.info("Listed %d app instance(s)", len(instances))
        return instances

    def list_profiles(self, app_instance_id: str, timeout: Optional[float] = None) -> List[Profile]:
        """List the role profiles exposed by an app instance.

        An unknown instance id is reported by the portal as an error status.
        """
        path = f"/instance/appinstance/{quote(app_instance_id, safe='')}/profiles"
        profiles = self._first_page(path, Profile.from_dict, timeout)
        logger.info("Listed %d profile(s) for app instance %s", len(profiles), app_instance_id)
        return profiles
