import pytest

from stopforumspam.utils.validators import is_valid_email, is_valid_ip, is_valid_md5


@pytest.mark.parametrize("value", ["123.45.67.89", "8.8.8.8", "::1", "2001:db8::ff00:42:8329", "fe80::1"])
def test_valid_ip_addresses(value):
    assert is_valid_ip(value)


@pytest.mark.parametrize("value", ["999.999.999.999", "not-an-ip", "", "1.2.3", None, 12345])
def test_invalid_ip_addresses(value):
    assert not is_valid_ip(value)


def test_md5_shape():
    assert is_valid_md5("d41d8cd98f00b204e9800998ecf8427e")
    assert is_valid_md5("D41D8CD98F00B204E9800998ECF8427E")
    assert not is_valid_md5("short")
    assert not is_valid_md5("d41d8cd98f00b204e9800998ecf8427e0")
    assert not is_valid_md5("g41d8cd98f00b204e9800998ecf8427e")


def test_email_syntax():
    assert is_valid_email("test@test.com")
    assert is_valid_email("first.last+tag@example.co.uk")
    assert is_valid_email("user@example.test")
    assert is_valid_email("\"quoted\"@example.com")
    assert not is_valid_email("not-an-email")
    assert not is_valid_email("missing@")
    assert not is_valid_email("user@localhost")
    assert not is_valid_email("")
