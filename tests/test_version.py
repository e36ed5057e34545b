import pytest

from prestashop_webservice.core.version import is_at_least, parse_version


def test_parse_version_keeps_every_component():
    assert parse_version("1.6.0.0") == (1, 6, 0, 0)
    assert parse_version("1.6") == (1, 6)


def test_parse_version_ignores_suffix():
    assert parse_version("8.1.2-rc1") == (8, 1, 2)


def test_parse_version_rejects_garbage():
    assert parse_version("unknown") is None
    assert parse_version("") is None


@pytest.mark.parametrize(
    "version,minimum,expected",
    [
        ("1.6.0.0", "1.6.0.0", True),
        ("1.6", "1.6.0.0", False),
        ("1.6.0", "1.6.0.0", False),
        ("1.6.1.24", "1.6.0.0", True),
        ("1.5.6.3", "1.6.0.0", False),
        ("1.10.0", "1.6.0.0", True),
        ("8.1.2", "1.7", True),
        ("1.7.8.0", "8.0.0", False),
    ],
)
def test_is_at_least_uses_numeric_ordering(version, minimum, expected):
    assert is_at_least(version, minimum) is expected


def test_unknown_version_is_never_compatible():
    assert is_at_least("unknown", "0.0.1") is False
