from sso_portal.core.portal import naming
from sso_portal.core.portal.models import AppInstance


def make_instance(name: str) -> AppInstance:
    return AppInstance(
        id="ins-1",
        name=name,
        description="",
        application_id="app-1",
        application_name="AWS Account",
        icon="https://example.com/icon.png",
    )


def test_account_id_and_name_from_standard_name():
    instance = make_instance("123456789012 (Production Account)")
    assert instance.account_id == "123456789012"
    assert instance.account_name == "Production Account"


def test_plain_name_has_no_account_details():
    instance = make_instance("Shared Services")
    assert instance.account_id is None
    assert instance.account_name is None


def test_only_first_parenthesised_group_is_used():
    instance = make_instance("12 Dev (A) (B)")
    assert instance.account_name == "A"
    assert instance.account_id == "12"


def test_account_id_requires_leading_digit():
    assert naming.account_id(" 123 (Leading space)") is None
    assert naming.account_id("Dev 123456789012") is None


def test_account_id_stops_at_first_non_digit():
    assert naming.account_id("0042-legacy") == "0042"


def test_empty_parentheses_do_not_match():
    assert naming.account_name("123 ()") is None


def test_patterns_are_compiled_once():
    before = naming.ACCOUNT_NAME_PATTERN
    naming.account_name("1 (x)")
    naming.account_name("2 (y)")
    assert naming.ACCOUNT_NAME_PATTERN is before
