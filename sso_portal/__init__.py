"""SSO portal client package.

To use the portal client:
    from sso_portal.core.portal import SsoClient

To load settings from the environment:
    from sso_portal.config import load_settings
"""
