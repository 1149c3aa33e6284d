"""Configuration module for the SSO portal client."""
from .settings import PortalConfig, load_settings, portal_base_url

__all__ = ["PortalConfig", "load_settings", "portal_base_url"]
