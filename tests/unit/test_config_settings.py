import pytest

from sso_portal.config import settings
from sso_portal.config.settings import PortalConfig, load_settings, portal_base_url


def test_defaults_when_environment_empty():
    cfg = load_settings()
    assert cfg.region == "us-east-1"
    assert cfg.org_id == ""
    assert cfg.request_timeout == settings.DEFAULT_REQUEST_TIMEOUT


def test_values_read_from_environment(monkeypatch):
    monkeypatch.setenv("SSO_PORTAL_REGION", "eu-central-1")
    monkeypatch.setenv("SSO_PORTAL_ORG_ID", "o-abc123")
    monkeypatch.setenv("SSO_PORTAL_REQUEST_TIMEOUT", "2.5")
    cfg = load_settings()
    assert cfg == PortalConfig(
        region="eu-central-1",
        org_id="o-abc123",
        request_timeout=2.5,
    )


def test_blank_region_falls_back_to_default(monkeypatch):
    monkeypatch.setenv("SSO_PORTAL_REGION", "  ")
    assert load_settings().region == "us-east-1"


@pytest.mark.parametrize("raw", ["soon", "0", "-3"])
def test_invalid_timeout_raises(monkeypatch, raw):
    monkeypatch.setenv("SSO_PORTAL_REQUEST_TIMEOUT", raw)
    with pytest.raises(ValueError):
        load_settings()


def test_base_url_is_region_scoped_https_origin():
    assert portal_base_url("ap-northeast-1") == "https://portal.sso.ap-northeast-1.amazonaws.com"
    assert PortalConfig(region="eu-west-1").base_url == "https://portal.sso.eu-west-1.amazonaws.com"


def test_config_is_immutable():
    cfg = PortalConfig()
    with pytest.raises(AttributeError):
        cfg.region = "eu-west-1"
