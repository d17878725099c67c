"""Tests for the Jenkins hash and the C1/C2 classifier."""

from pgcodec._hash import is_c1_offset, jenkins32


def test_zero():
    assert jenkins32(0) == 0


def test_known_values():
    assert jenkins32(1) == 2938272695
    assert jenkins32(2) == 1582626671
    assert jenkins32(331559) == 1265016177


def test_stays_in_32_bits():
    for key in (1, 0xFFFF, 0x7FFFFFFF, 0xFFFFFFFF):
        assert 0 <= jenkins32(key) < 2**32


def test_input_masked_to_32_bits():
    assert jenkins32(2**32 + 5) == jenkins32(5)


def test_classifier():
    """Low bit 0 selects the single-word grammar."""
    assert is_c1_offset(0)
    assert is_c1_offset(12345)
    assert not is_c1_offset(1)
    assert not is_c1_offset(331559)


def test_classifier_mixes_grammars():
    c1 = sum(is_c1_offset(o) for o in range(4096))
    assert 1000 < c1 < 3096
