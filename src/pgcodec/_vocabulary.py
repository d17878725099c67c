"""Vocabulary-derived tables: run-length offsets and the fragment index."""

from __future__ import annotations

import bisect
import logging
import threading
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

import ahocorasick

from . import _vocab
from ._types import Fragment

log = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class RunLengthTable:
    """Cumulative numbering of one fragment family.

    Each fragment occupies ``run_length`` consecutive slots starting at
    ``offset``; ``total`` is the size of the family's numbering space.
    """

    fragments: tuple[str, ...]        # canonical case, numbering order
    run_lengths: Mapping[str, int]    # keyed by lower-case text
    offsets: Mapping[str, int]
    starts: tuple[int, ...]
    total: int

    @classmethod
    def build(
        cls,
        fragments: Iterable[str],
        exceptions: Mapping[str, int],
        default: int,
    ) -> RunLengthTable:
        ordered = tuple(fragments)
        run_lengths: dict[str, int] = {}
        offsets: dict[str, int] = {}
        starts: list[int] = []
        total = 0
        for frag in ordered:
            key = frag.lower()
            length = exceptions.get(key, default)
            run_lengths[key] = length
            offsets[key] = total
            starts.append(total)
            total += length
        return cls(
            fragments=ordered,
            run_lengths=MappingProxyType(run_lengths),
            offsets=MappingProxyType(offsets),
            starts=tuple(starts),
            total=total,
        )

    def run_length(self, fragment: str) -> int:
        return self.run_lengths[fragment.lower()]

    def offset(self, fragment: str) -> int:
        return self.offsets[fragment.lower()]

    def locate(self, position: int) -> str:
        """Return the last fragment whose offset is <= position."""
        idx = bisect.bisect_right(self.starts, position) - 1
        return self.fragments[max(idx, 0)]

    def __contains__(self, fragment: object) -> bool:
        return isinstance(fragment, str) and fragment.lower() in self.offsets


class _FragmentIndexBuilder:
    """Accumulate role flags per fragment text, then freeze them."""

    __slots__ = ("_roles",)

    def __init__(self) -> None:
        self._roles: dict[str, dict[str, Any]] = {}

    def _entry(self, text: str) -> dict[str, Any]:
        key = text.lower()
        entry = self._roles.get(key)
        if entry is None:
            entry = {"value": key, "text": text}
            self._roles[key] = entry
        return entry

    def add_prefixes(
        self,
        prefixes: Iterable[str],
        c1_prefixes: frozenset[str],
        c2_prefixes: frozenset[str],
    ) -> None:
        for i, text in enumerate(prefixes):
            entry = self._entry(text)
            # Prefixes carry the capitalised spelling used in formatted names.
            entry["text"] = text
            entry["is_prefix"] = True
            entry["c1_consonant_infix"] = entry["value"] in c1_prefixes
            entry["c2_consonant_suffix"] = entry["value"] in c2_prefixes
            entry["prefix_index"] = i

    def add_infixes(self, infixes: Iterable[str], vowel: bool) -> None:
        for i, text in enumerate(infixes):
            entry = self._entry(text)
            entry["is_infix"] = True
            entry["vowel_infix"] = vowel
            entry["infix_index"] = i

    def add_suffixes(self, suffixes: Iterable[str], vowel: bool) -> None:
        for i, text in enumerate(suffixes):
            entry = self._entry(text)
            entry["is_suffix"] = True
            entry["vowel_suffix"] = vowel
            entry["suffix_index"] = i

    def build(self) -> tuple[Fragment, ...]:
        frags = [Fragment(**entry) for entry in self._roles.values()]
        # Longest first so greedy matching prefers the most specific fragment.
        frags.sort(key=lambda f: (-len(f.value), f.value))
        return tuple(frags)


@dataclass(slots=True, frozen=True)
class Vocabulary:
    """Immutable vocabulary tables shared by every codec instance."""

    prefixes: RunLengthTable
    vowel_infixes: RunLengthTable
    consonant_infixes: RunLengthTable
    vowel_suffixes: tuple[str, ...]
    consonant_suffixes: tuple[str, ...]
    c1_consonant_infix_prefixes: frozenset[str]
    c2_consonant_suffix_prefixes: frozenset[str]
    fragments: tuple[Fragment, ...]
    by_value: Mapping[str, Fragment]
    automaton: ahocorasick.Automaton

    def infixes(self, vowel: bool) -> RunLengthTable:
        return self.vowel_infixes if vowel else self.consonant_infixes

    def suffixes(self, vowel: bool) -> tuple[str, ...]:
        return self.vowel_suffixes if vowel else self.consonant_suffixes


def build_vocabulary(
    prefixes: Iterable[str] = _vocab.PREFIXES,
    vowel_infixes: Iterable[str] = _vocab.VOWEL_INFIXES,
    consonant_infixes: Iterable[str] = _vocab.CONSONANT_INFIXES,
    vowel_suffixes: Iterable[str] = _vocab.VOWEL_SUFFIXES,
    consonant_suffixes: Iterable[str] = _vocab.CONSONANT_SUFFIXES,
    c1_consonant_infix_prefixes: Iterable[str] = _vocab.C1_CONSONANT_INFIX_PREFIXES,
    c2_consonant_suffix_prefixes: Iterable[str] = _vocab.C2_CONSONANT_SUFFIX_PREFIXES,
    prefix_run_lengths: Mapping[str, int] = _vocab.PREFIX_RUN_LENGTHS,
    infix_run_lengths: Mapping[str, int] = _vocab.INFIX_RUN_LENGTHS,
) -> Vocabulary:
    """Build a Vocabulary from fragment lists and run-length exceptions."""
    prefixes = tuple(prefixes)
    vowel_infixes = tuple(vowel_infixes)
    consonant_infixes = tuple(consonant_infixes)
    vowel_suffixes = tuple(s.lower() for s in vowel_suffixes)
    consonant_suffixes = tuple(s.lower() for s in consonant_suffixes)
    c1_set = frozenset(p.lower() for p in c1_consonant_infix_prefixes)
    c2_set = frozenset(p.lower() for p in c2_consonant_suffix_prefixes)
    prefix_exc = {k.lower(): v for k, v in prefix_run_lengths.items()}
    infix_exc = {k.lower(): v for k, v in infix_run_lengths.items()}

    prefix_table = RunLengthTable.build(
        prefixes, prefix_exc, _vocab.PREFIX_RUN_LENGTH_DEFAULT,
    )
    # A vowel infix is followed by a family-2 suffix and vice versa, so each
    # infix family's default run covers the opposite suffix list.
    vowel_table = RunLengthTable.build(
        (i.lower() for i in vowel_infixes), infix_exc, len(consonant_suffixes),
    )
    consonant_table = RunLengthTable.build(
        (i.lower() for i in consonant_infixes), infix_exc, len(vowel_suffixes),
    )

    builder = _FragmentIndexBuilder()
    builder.add_prefixes(prefixes, c1_set, c2_set)
    builder.add_infixes(vowel_infixes, vowel=True)
    builder.add_infixes(consonant_infixes, vowel=False)
    builder.add_suffixes(vowel_suffixes, vowel=True)
    builder.add_suffixes(consonant_suffixes, vowel=False)
    fragments = builder.build()

    ac = ahocorasick.Automaton()
    for idx, frag in enumerate(fragments):
        ac.add_word(frag.value, idx)
    ac.make_automaton()

    log.debug(
        "Built vocabulary: %d fragments, prefix run %d, infix runs %d/%d",
        len(fragments), prefix_table.total,
        vowel_table.total, consonant_table.total,
    )
    return Vocabulary(
        prefixes=prefix_table,
        vowel_infixes=vowel_table,
        consonant_infixes=consonant_table,
        vowel_suffixes=vowel_suffixes,
        consonant_suffixes=consonant_suffixes,
        c1_consonant_infix_prefixes=c1_set,
        c2_consonant_suffix_prefixes=c2_set,
        fragments=fragments,
        by_value=MappingProxyType({f.value: f for f in fragments}),
        automaton=ac,
    )


_lock = threading.Lock()
_shared: Vocabulary | None = None


def get_vocabulary() -> Vocabulary:
    """Return the process-wide vocabulary, building it on first use."""
    global _shared
    vocab = _shared
    if vocab is None:
        with _lock:
            vocab = _shared
            if vocab is None:
                vocab = build_vocabulary()
                _shared = vocab
    return vocab
