"""Tests for fragment tokenization of sector names."""

from pgcodec._tokenizer import FragmentTokenizer


def _values(frags):
    return [f.value for f in frags]


def test_scan_longest_first(codec):
    tok = FragmentTokenizer(codec.vocabulary)
    scan = tok.scan("thob")
    assert sorted(scan) == [0, 1, 2, 3]
    assert [codec.vocabulary.fragments[i].value for i in scan[0]] == ["th", "t"]


def test_two_word_name(codec):
    tok = FragmentTokenizer(codec.vocabulary)
    frags = tok.tokenize("Blae Eock")
    assert _values(frags) == ["bl", "ae", "eo", "ck"]


def test_word_start_loses_infix_and_suffix_roles(codec):
    tok = FragmentTokenizer(codec.vocabulary)
    frags = tok.tokenize("blae aeck")
    assert frags[2].value == "ae"
    assert frags[2].is_prefix
    assert not frags[2].is_infix
    assert not frags[2].is_suffix


def test_infix_after_other_family_loses_prefix_role(codec):
    tok = FragmentTokenizer(codec.vocabulary)
    frags = tok.tokenize("thob")
    assert _values(frags) == ["th", "o", "b"]
    assert not frags[1].is_prefix
    assert not frags[2].is_prefix
    assert frags[2].is_suffix


def test_role_changes_do_not_touch_index(codec):
    tok = FragmentTokenizer(codec.vocabulary)
    tok.tokenize("thob")
    assert codec.vocabulary.by_value["o"].is_prefix
    assert codec.vocabulary.by_value["b"].is_prefix


def test_ambiguous_spelling_yields_every_split(codec):
    tok = FragmentTokenizer(codec.vocabulary)
    splits = [_values(s) for s in tok.segmentations("eae")]
    assert splits[:3] == [["eae"], ["ea", "e"], ["e", "ae"]]
    assert ["e", "a", "e"] in splits


def test_too_many_fragments(codec):
    tok = FragmentTokenizer(codec.vocabulary)
    assert tok.tokenize("thothothoth") is None


def test_rejects_word_counts(codec):
    tok = FragmentTokenizer(codec.vocabulary)
    assert tok.tokenize("") is None
    assert tok.tokenize("   ") is None
    assert tok.tokenize("th o b") is None


def test_unmatched_text(codec):
    tok = FragmentTokenizer(codec.vocabulary)
    assert tok.tokenize("th9b") is None
