"""Tests for sector name encoding and decoding."""

import threading

import pytest

from pgcodec import INVALID_COORDINATE, GridCoordinate, SectorCodec


def test_known_c2_name(codec):
    assert codec.name_for((39, 30, 20)) == "Blae Eock"
    assert codec.name_for(GridCoordinate(1, 0, 0)) == "Thio Thoe"


def test_known_c1_name(codec):
    assert codec.name_for((0, 0, 0)) == "Thob"


def test_known_coordinates(codec):
    assert codec.coordinate_for("Blae Eock") == GridCoordinate(39, 30, 20)
    assert codec.coordinate_for("Thio Thoe") == GridCoordinate(1, 0, 0)
    assert codec.coordinate_for("Thob") == GridCoordinate(0, 0, 0)


def test_decode_ignores_case_and_spacing(codec):
    expected = GridCoordinate(39, 30, 20)
    assert codec.coordinate_for("blae eock") == expected
    assert codec.coordinate_for("BLAE EOCK") == expected
    assert codec.coordinate_for("  Blae   Eock ") == expected


def test_offset():
    assert GridCoordinate(39, 30, 20).offset == 331559
    assert GridCoordinate.from_offset(331559) == GridCoordinate(39, 30, 20)


def test_sector_class(codec):
    assert codec.sector_class((0, 0, 0)) == 1
    assert codec.sector_class((39, 30, 20)) == 2


def test_out_of_grid(codec):
    assert codec.name_for((128, 0, 0)) is None
    assert codec.name_for((0, -1, 0)) is None
    assert codec.c1_name_for((0, 0, 128)) is None
    assert codec.c2_name_for((-5, 0, 0)) is None


@pytest.mark.parametrize("name", [
    "",
    "Blae Eock Thob",
    "Qqqqqqq",
    "Bl4e Eock",
    "Thob Thob",
])
def test_invalid_names(codec, name):
    assert codec.coordinate_for(name) == INVALID_COORDINATE
    assert codec.fragments_for(name) is None


def test_invalid_coordinate():
    assert not INVALID_COORDINATE.is_valid
    assert INVALID_COORDINATE == GridCoordinate(-128, -128, -128)


def test_forced_grammar(codec):
    """Either grammar can name any cell when asked directly."""
    assert codec.c2_name_for((39, 30, 20)) == "Blae Eock"
    assert codec.c1_name_for((0, 0, 0)) == "Thob"
    assert " " in codec.c2_name_for((0, 0, 0))


def test_sampled_round_trip(codec):
    """Every generated name decodes back to the cell it came from."""
    checked = 0
    for offset in range(0, 1 << 21, 2039):
        pos = GridCoordinate.from_offset(offset)
        name = codec.name_for(pos)
        if name is None:
            continue
        assert codec.coordinate_for(name) == pos
        assert codec.name_for(codec.coordinate_for(name)) == name
        checked += 1
    assert checked > 500


def test_c1_names_are_one_word(codec):
    for offset in range(0, 1 << 21, 4099):
        pos = GridCoordinate.from_offset(offset)
        name = codec.name_for(pos)
        if name is None:
            assert codec.sector_class(pos) == 1
            continue
        assert (" " in name) == (codec.sector_class(pos) == 2)


def test_sector_fragments(codec):
    assert codec.sector_fragments("blae eock") == ["Bl", "ae", "Eo", "ck"]
    assert codec.sector_fragments("THOB") == ["Th", "o", "b"]
    assert codec.sector_fragments("Qqqqqqq") is None


def test_format_sector_name(codec):
    assert codec.format_sector_name(["Bl", "ae", "Eo", "ck"]) == "Blae Eock"
    assert codec.format_sector_name(["Th", "o", "b"]) == "Thob"
    assert codec.format_sector_name(["Th", "o", "th", "b"]) == "Thothb"


def test_canonical_sector_name(codec):
    assert codec.canonical_sector_name("BLAE EOCK") == "Blae Eock"
    assert codec.canonical_sector_name("thob") == "Thob"
    assert codec.canonical_sector_name("nonsense words") is None


def test_name_cache(codec):
    first = codec.name_for((39, 30, 20))
    assert codec.name_for(GridCoordinate(39, 30, 20)) is first


def test_coordinate_cache(codec):
    first = codec.coordinate_for("Blae Eock")
    assert codec.coordinate_for("blae eock") is first


def test_invalid_results_are_cached(codec):
    codec.coordinate_for("Qqqqqqq")
    assert codec.coordinate_for("QQQQQQQ") is INVALID_COORDINATE


def test_independent_codecs_agree(codec):
    other = SectorCodec(codec.vocabulary)
    assert other.name_for((39, 30, 20)) == codec.name_for((39, 30, 20))
    assert other.vocabulary is codec.vocabulary


def test_concurrent_use():
    shared = SectorCodec()
    offsets = list(range(0, 1 << 21, 7919))
    expected = {o: SectorCodec().name_for(GridCoordinate.from_offset(o)) for o in offsets}
    errors = []

    def work():
        try:
            for o in offsets:
                name = shared.name_for(GridCoordinate.from_offset(o))
                assert name == expected[o]
                if name is not None:
                    shared.coordinate_for(name)
        except Exception as exc:
            errors.append(exc)

    threads = [threading.Thread(target=work) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert errors == []


def test_unnamed_c1_cell(codec):
    """C1 cells whose suffix index runs past the suffix list have no name."""
    pos = GridCoordinate(1, 0, 127)
    assert codec.sector_class(pos) == 1
    assert codec.name_for(pos) is None
    assert codec.c1_name_for(pos) is None


def test_ungenerated_spelling(codec):
    """A prefix with a run of one (Tz) cannot take suffix index 1."""
    pos = codec.coordinate_for("Tzio Blae")
    assert pos == GridCoordinate(30, 62, 41)
    assert codec.name_for(pos) == "Phloe Blae"
    assert not codec.is_generated_name("Tzio Blae")
    assert codec.is_generated_name("phloe  blae")
    assert codec.is_generated_name("Blae Eock")
    assert not codec.is_generated_name("Qqqqqqq")
