"""Syntax predicates for identity attributes."""
from __future__ import annotations

import ipaddress
import re
from typing import Any

from email_validator import EmailNotValidError, validate_email

_MD5_PATTERN = re.compile(r"[0-9a-fA-F]{32}")


def is_valid_email(value: Any) -> bool:
    if not isinstance(value, str) or not value:
        return False
    try:
        validate_email(value, check_deliverability=False, test_environment=True, allow_quoted_local=True)
    except EmailNotValidError:
        return False
    return True


def is_valid_ip(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    try:
        ipaddress.ip_address(value)
    except ValueError:
        return False
    return True


def is_valid_md5(value: Any) -> bool:
    return isinstance(value, str) and _MD5_PATTERN.fullmatch(value) is not None
