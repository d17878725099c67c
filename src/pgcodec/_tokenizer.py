"""Longest-match tokenization of sector names into fragments."""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

    from ._types import Fragment
    from ._vocabulary import Vocabulary

MAX_FRAGMENTS = 4


class FragmentTokenizer:
    __slots__ = ("_automaton", "_fragments")

    def __init__(self, vocabulary: Vocabulary) -> None:
        self._automaton = vocabulary.automaton
        self._fragments = vocabulary.fragments

    def scan(self, word: str) -> dict[int, list[int]]:
        """Aho-Corasick scan of one word.

        Returns a map of start position -> fragment indexes beginning there,
        longest first.
        """
        by_start: dict[int, list[int]] = {}
        for end_inclusive, idx in self._automaton.iter(word):
            start = end_inclusive + 1 - len(self._fragments[idx].value)
            by_start.setdefault(start, []).append(idx)
        for matches in by_start.values():
            # The fragment index is sorted longest first.
            matches.sort()
        return by_start

    def segmentations(self, name: str) -> Iterator[list[Fragment]]:
        """Yield every split of ``name`` into at most four fragments.

        Splits come in longest-match-first order, so the first one is the
        greedy split whenever that succeeds.
        """
        words = name.lower().split()
        if not words or len(words) > 2:
            return
        scans = [self.scan(w) for w in words]
        yield from self._walk(words, scans, 0, 0, [])

    def tokenize(self, name: str) -> list[Fragment] | None:
        """Return the first split of ``name``, or None if it does not split."""
        return next(self.segmentations(name), None)

    def _walk(
        self,
        words: list[str],
        scans: list[dict[int, list[int]]],
        word_no: int,
        pos: int,
        result: list[Fragment],
    ) -> Iterator[list[Fragment]]:
        word = words[word_no]
        if pos == len(word):
            if word_no + 1 == len(words):
                yield list(result)
            else:
                yield from self._walk(words, scans, word_no + 1, 0, result)
            return
        if len(result) == MAX_FRAGMENTS:
            return

        for idx in scans[word_no].get(pos, ()):
            frag = self._fragments[idx]
            if word_no > 0 and pos == 0:
                # A fragment after a space can only start a word.
                if frag.is_infix or frag.is_suffix:
                    frag = dataclasses.replace(frag, is_infix=False, is_suffix=False)
            elif (
                result
                and frag.is_infix
                and frag.is_prefix
                and frag.vowel_infix != result[-1].vowel_infix
            ):
                frag = dataclasses.replace(frag, is_prefix=False)
            result.append(frag)
            yield from self._walk(words, scans, word_no, pos + len(frag.value), result)
            result.pop()
