"""SectorCodec: sector grid coordinates <-> procedurally generated names."""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from ._hash import is_c1_offset
from ._interleave import deinterleave2, interleave2
from ._tokenizer import FragmentTokenizer
from ._types import INVALID_COORDINATE, GridCoordinate
from ._vocabulary import get_vocabulary

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ._types import Fragment
    from ._vocabulary import RunLengthTable, Vocabulary

log = logging.getLogger(__name__)


class SectorCodec:
    """Encode and decode sector names. Holds the vocabulary and both caches."""

    __slots__ = ("_vocab", "_tokenizer", "_names", "_coords")

    def __init__(self, vocabulary: Vocabulary | None = None) -> None:
        self._vocab = vocabulary if vocabulary is not None else get_vocabulary()
        self._tokenizer = FragmentTokenizer(self._vocab)
        self._names: dict[GridCoordinate, str | None] = {}
        self._coords: dict[str, GridCoordinate] = {}

    @property
    def vocabulary(self) -> Vocabulary:
        return self._vocab

    # -- Encoding --

    def name_for(self, coordinate: GridCoordinate | Sequence[int]) -> str | None:
        """Return the sector name for a grid cell, or None if it has none."""
        pos = GridCoordinate.coerce(coordinate)
        if pos in self._names:
            return self._names[pos]
        if not pos.is_valid:
            return None

        offset = pos.offset
        if is_c1_offset(offset):
            log.debug("Sector %s (offset %d) uses C1 naming", pos, offset)
            name = self._c1_name(offset)
        else:
            log.debug("Sector %s (offset %d) uses C2 naming", pos, offset)
            name = self._c2_name(offset)

        self._names[pos] = name
        return name

    def c1_name_for(self, coordinate: GridCoordinate | Sequence[int]) -> str | None:
        """Name a cell with the single-word grammar, ignoring the classifier."""
        pos = GridCoordinate.coerce(coordinate)
        return self._c1_name(pos.offset) if pos.is_valid else None

    def c2_name_for(self, coordinate: GridCoordinate | Sequence[int]) -> str | None:
        """Name a cell with the two-word grammar, ignoring the classifier."""
        pos = GridCoordinate.coerce(coordinate)
        return self._c2_name(pos.offset) if pos.is_valid else None

    def sector_class(self, coordinate: GridCoordinate | Sequence[int]) -> int:
        """1 for a single-word (C1) sector, 2 for a two-word (C2) sector."""
        return 1 if is_c1_offset(GridCoordinate.coerce(coordinate).offset) else 2

    def _c1_name(self, offset: int) -> str | None:
        vocab = self._vocab
        prefixes = vocab.prefixes

        prefix_cnt, cur = divmod(offset, prefixes.total)
        prefix = prefixes.locate(cur)
        cur -= prefixes.offset(prefix)
        frags = [prefix]

        # Vowel-ending prefixes continue with a consonant infix.
        vowel = prefix.lower() not in vocab.c1_consonant_infix_prefixes
        infixes = vocab.infixes(vowel)
        infix_cnt, cur = divmod(prefix_cnt * prefixes.run_length(prefix) + cur, infixes.total)
        infix = infixes.locate(cur)
        cur -= infixes.offset(infix)
        frags.append(infix)
        suffixes = vocab.suffixes(not vowel)
        next_idx = infixes.run_length(infix) * infix_cnt + cur

        if next_idx >= len(suffixes):
            # Past the three-fragment names: draw a second infix from the
            # other family.
            vowel = not vowel
            infixes = vocab.infixes(vowel)
            infix_cnt, cur = divmod(next_idx, infixes.total)
            infix = infixes.locate(cur)
            cur -= infixes.offset(infix)
            frags.append(infix)
            suffixes = vocab.suffixes(not vowel)
            next_idx = infixes.run_length(infix) * infix_cnt + cur

        if next_idx >= len(suffixes):
            log.debug("Offset %d has no C1 name", offset)
            return None
        frags.append(suffixes[next_idx])
        return "".join(frags)

    def _c2_word(self, idx: int) -> tuple[str, str]:
        vocab = self._vocab
        prefix = vocab.prefixes.locate(idx)
        suffixes = vocab.suffixes(prefix.lower() not in vocab.c2_consonant_suffix_prefixes)
        return prefix, suffixes[idx - vocab.prefixes.offset(prefix)]

    def _c2_name(self, offset: int) -> str:
        idx0, idx1 = deinterleave2(offset)
        p0, s0 = self._c2_word(idx0)
        p1, s1 = self._c2_word(idx1)
        return f"{p0}{s0} {p1}{s1}"

    # -- Decoding --

    def fragments_for(self, name: str) -> list[Fragment] | None:
        """Fragments of the split ``coordinate_for`` settles on, or None."""
        resolved = self._resolve(_normalize(name))
        return resolved[0] if resolved is not None else None

    def coordinate_for(self, name: str) -> GridCoordinate:
        """Return the grid cell named ``name``, or INVALID_COORDINATE."""
        key = _normalize(name)
        cached = self._coords.get(key)
        if cached is not None:
            return cached

        resolved = self._resolve(key)
        if resolved is None:
            log.debug("Not a PG sector name: %r", name)
            coords = INVALID_COORDINATE
        else:
            coords = resolved[1]

        self._coords[key] = coords
        return coords

    def is_generated_name(self, name: str) -> bool:
        """True if some grid cell generates ``name``, ignoring case and spacing.

        ``coordinate_for`` also decodes spellings no cell carries, such as a
        suffix index past its prefix's run ("Tzio" lands in Phl's range).
        """
        pos = self.coordinate_for(name)
        if not pos.is_valid:
            return False
        generated = self.name_for(pos)
        return generated is not None and generated.lower() == _normalize(name)

    def _resolve(self, key: str) -> tuple[list[Fragment], GridCoordinate] | None:
        # Some spellings split more than one way ("Eae" is Ea+e, E+ae or the
        # prefix Eae). Prefer the split whose cell is actually named ``key``,
        # else the first split that decodes at all.
        first = None
        for frags in self._tokenizer.segmentations(key):
            offset = self._offset_for(frags)
            if offset is None:
                continue
            pos = GridCoordinate.from_offset(offset)
            if first is None:
                first = (frags, pos)
            generated = self.name_for(pos)
            if generated is not None and generated.lower() == key:
                return frags, pos
        return first

    def _offset_for(self, frags: list[Fragment]) -> int | None:
        shape = _shape(frags)
        if shape == 2:
            return self._c2_offset(frags)
        if shape == 1:
            return self._c1_offset(frags)
        return None

    def _c2_offset(self, frags: list[Fragment]) -> int | None:
        p0, s0, p1, s1 = frags
        # Consonant suffixes follow exactly the C2 consonant-suffix prefixes.
        if p0.c2_consonant_suffix == s0.vowel_suffix or p1.c2_consonant_suffix == s1.vowel_suffix:
            return None
        prefixes = self._vocab.prefixes
        idx0 = prefixes.offset(p0.value) + s0.suffix_index
        idx1 = prefixes.offset(p1.value) + s1.suffix_index
        return interleave2(idx0, idx1)

    def _c1_offset(self, frags: list[Fragment]) -> int | None:
        prefix, *infixes, suffix = frags
        if prefix.c1_consonant_infix == infixes[0].vowel_infix:
            return None
        if len(infixes) == 2 and infixes[0].vowel_infix == infixes[1].vowel_infix:
            return None
        if infixes[-1].vowel_infix == suffix.vowel_suffix:
            return None

        offset = suffix.suffix_index
        for infix in reversed(infixes):
            offset = _fold(self._vocab.infixes(infix.vowel_infix), infix.value, offset)
        return _fold(self._vocab.prefixes, prefix.value, offset)

    # -- Formatting --

    def sector_fragments(self, name: str) -> list[str] | None:
        """Canonical-case fragments of a valid sector name, e.g. ["Bl", "ae", "Eo", "ck"]."""
        frags = self.fragments_for(name)
        if frags is None:
            return None
        out = [f.value for f in frags]
        out[0] = frags[0].text
        if _shape(frags) == 2:
            out[2] = frags[2].text
        return out

    def format_sector_name(self, fragments: Sequence[str]) -> str:
        """Join fragments, separating the two words of a C2 name.

        A C2 name is recognised by its capitalised third fragment.
        """
        if len(fragments) == 4 and fragments[2][:1].isupper():
            return f"{fragments[0]}{fragments[1]} {fragments[2]}{fragments[3]}"
        return "".join(fragments)

    def canonical_sector_name(self, name: str) -> str | None:
        """Return the correctly-cased form of a sector name, or None."""
        frags = self.sector_fragments(name)
        if frags is None:
            return None
        return self.format_sector_name(frags)


def _normalize(name: str) -> str:
    return " ".join(name.lower().split())


def _shape(frags: list[Fragment]) -> int:
    """1 for a C1 fragment shape, 2 for C2, 0 for neither."""
    if (
        len(frags) == 4
        and frags[0].is_prefix
        and frags[1].is_suffix
        and frags[2].is_prefix
        and frags[3].is_suffix
    ):
        return 2
    if (
        len(frags) in (3, 4)
        and frags[0].is_prefix
        and all(f.is_infix for f in frags[1:-1])
        and frags[-1].is_suffix
    ):
        return 1
    return 0


def _fold(table: RunLengthTable, fragment: str, offset: int) -> int:
    # Lift an offset from the following family's space into this fragment's.
    runs, rem = divmod(offset, table.run_length(fragment))
    return runs * table.total + rem + table.offset(fragment)


_default_lock = threading.Lock()
_default: SectorCodec | None = None


def default_codec() -> SectorCodec:
    """Return the process-wide codec over the shared vocabulary."""
    global _default
    codec = _default
    if codec is None:
        with _default_lock:
            codec = _default
            if codec is None:
                codec = SectorCodec()
                _default = codec
    return codec
