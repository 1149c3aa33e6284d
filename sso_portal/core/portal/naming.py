"""Account details derived from an app instance's display name.

Portal app instances for cloud accounts are usually named like
``"123456789012 (Production Account)"``. The name is free text controlled by
whoever registered the application, so these helpers are best effort: no
match is a normal outcome and returns ``None``.
"""
from __future__ import annotations
import re
from typing import Optional

ACCOUNT_NAME_PATTERN = re.compile(r"\((.+?)\)")
ACCOUNT_ID_PATTERN = re.compile(r"^([0-9]+)")


def account_name(name: str) -> Optional[str]:
    """Return the text inside the first parenthesised group of ``name``.

    Example:
        >>> account_name("12 Dev (A) (B)")
        'A'
    """
    match = ACCOUNT_NAME_PATTERN.search(name)
    return match.group(1) if match else None


def account_id(name: str) -> Optional[str]:
    """Return the run of leading decimal digits of ``name``, if any.

    Example:
        >>> account_id("123456789012 (Production Account)")
        '123456789012'
    """
    match = ACCOUNT_ID_PATTERN.match(name)
    return match.group(1) if match else None
