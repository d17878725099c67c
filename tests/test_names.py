"""Tests for canonical names and name validation."""

import pytest

from pgcodec import (
    SystemNameParts,
    canonical_name,
    format_system_name,
    is_valid_name,
    is_valid_sector_name,
    system_name_fragments,
)


def test_canonical_system_name(codec):
    assert canonical_name("blae eock kc-c d0", codec=codec) == "Blae Eock KC-C d0"
    assert canonical_name("THOB aa-a H1-23", codec=codec) == "Thob AA-A h1-23"


def test_canonical_sector_only(codec):
    assert canonical_name("blae eock kc-c d0", sector_only=True, codec=codec) == "Blae Eock"


def test_canonical_sector_name(codec):
    assert canonical_name("BLAE EOCK", codec=codec) == "Blae Eock"
    assert canonical_name("thob", sector_only=True, codec=codec) == "Thob"


def test_canonical_unknown_sector(codec):
    assert canonical_name("Qqqqqqq AB-C d0", codec=codec) is None
    assert canonical_name("Qqqqqqq", codec=codec) is None


def test_system_name_fragments(codec):
    parts = system_name_fragments("blae eock kc-c d0", codec=codec)
    assert parts == SystemNameParts("Blae Eock", "K", "C", "C", "d", 0, 0)
    assert system_name_fragments("Blae Eock", codec=codec) is None
    assert system_name_fragments("Qqqqqqq AB-C d0", codec=codec) is None


def test_system_name_fragments_with_mid3(codec):
    parts = system_name_fragments("Thob AA-A h1-23", codec=codec)
    assert parts.n1 == 1
    assert parts.n2 == 23
    assert parts.mcode == "h"


def test_format_system_name():
    assert format_system_name(SystemNameParts("Blae Eock", "K", "C", "C", "d", 0, 0)) == "Blae Eock KC-C d0"
    assert format_system_name(SystemNameParts("Thob", "a", "a", "a", "H", 1, 23)) == "Thob AA-A h1-23"


@pytest.mark.parametrize("name,strict,expected", [
    ("Blae Eock KC-C d0", False, True),
    ("Blae Eock KC-C d0", True, True),
    ("Qqqqqqq AB-C d0", False, True),
    ("Qqqqqqq AB-C d0", True, False),
    ("Tzio Blae AA-A d0", False, True),
    ("Tzio Blae AA-A d0", True, False),
    ("Blae Eock", False, False),
    ("", False, False),
    ("Blae Eock KC-C z0", False, False),
])
def test_is_valid_name(codec, name, strict, expected):
    assert is_valid_name(name, strict=strict, codec=codec) is expected


def test_is_valid_sector_name(codec):
    assert is_valid_sector_name("Blae Eock", codec=codec)
    assert is_valid_sector_name("thob", codec=codec)
    assert not is_valid_sector_name("Qqqqqqq", codec=codec)
    assert not is_valid_sector_name("Tzio Blae", codec=codec)


def test_default_codec():
    assert canonical_name("blae eock kc-c d0") == "Blae Eock KC-C d0"
    assert is_valid_name("Blae Eock KC-C d0", strict=True)
