"""Substring-block similarity matching for "did you mean" suggestions.

The engine compares two sequences by greedily taking the longest common
contiguous block, then repeating on the unmatched regions to its left and
right. The total matched length gives a similarity ratio in [0, 1], which is
used to rank a list of candidate names against a mistyped key.

Every function here is pure: no I/O, no shared state, no exceptions of its own.
Strings are compared per code point, so non-ASCII names count the same as
ASCII ones.
"""

import logging
from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any

from .consts import DEFAULT_CUTOFF, DEFAULT_MAX_SUGGESTIONS

logger = logging.getLogger("argumend.matching")


@dataclass(frozen=True)
class Match:
    """A run of `len` equal elements at `a[a_start:]` and `b[b_start:]`.

    A zero-length match is the "nothing in common" sentinel; its start
    positions carry no meaning.
    """

    a_start: int
    b_start: int
    len: int

    @property
    def a_end(self) -> int:
        """Exclusive end index of the run in sequence a."""
        return self.a_start + self.len

    @property
    def b_end(self) -> int:
        """Exclusive end index of the run in sequence b."""
        return self.b_start + self.len


@dataclass(frozen=True)
class ScoredCandidate:
    """A candidate paired with its similarity ratio against a key."""

    candidate: Any
    score: float


def _as_sequence(seq: Iterable) -> Sequence:
    """Return an indexable view of `seq`, materialising plain iterables."""
    if isinstance(seq, Sequence):
        return seq
    return tuple(seq)


def _longest_match_in(
    a: Sequence, alo: int, ahi: int, b: Sequence, blo: int, bhi: int
) -> Match:
    """Find the longest run inside the window a[alo:ahi] x b[blo:bhi].

    Start pairs are scanned a-outer, b-inner, and the best is only replaced by a
    strictly longer run, so ties go to the smallest (a_start, b_start).
    """
    best = Match(a_start=0, b_start=0, len=0)
    for i in range(alo, ahi):
        # No run starting here can beat the current best
        if ahi - i <= best.len:
            break
        for j in range(blo, bhi):
            length = 0
            while (
                i + length < ahi
                and j + length < bhi
                and a[i + length] == b[j + length]
            ):
                length += 1
            if length > best.len:
                best = Match(a_start=i, b_start=j, len=length)
    return best


def find_longest_match(a: Sequence, b: Sequence) -> Match:
    """Find the longest contiguous run shared by `a` and `b`.

    Args:
        a: First sequence.
        b: Second sequence.

    Returns:
        The longest Match, preferring the leftmost start in `a` and then in `b`
        among runs of equal length. `Match(0, 0, 0)` when nothing matches.

    Example:
        >>> find_longest_match("abc", "bcd")
        Match(a_start=1, b_start=0, len=2)
    """
    a = _as_sequence(a)
    b = _as_sequence(b)
    return _longest_match_in(a, 0, len(a), b, 0, len(b))


def find_all_matches(a: Sequence, b: Sequence) -> list[Match]:
    """Decompose `a` and `b` into non-overlapping matching blocks.

    Takes the longest match, then handles the regions to its left and right
    independently with the same rule. A region is only searched when both of
    its sides are non-empty; unmatched leftovers are dropped.

    Args:
        a: First sequence.
        b: Second sequence.

    Returns:
        Matches with len > 0, sorted by (a_start, a_end, b_start, b_end).
        Blocks never overlap in `a` or in `b`, and adjacent blocks are not
        merged.
    """
    a = _as_sequence(a)
    b = _as_sequence(b)

    matches: list[Match] = []
    pending = deque([(0, len(a), 0, len(b))])
    while pending:
        alo, ahi, blo, bhi = pending.popleft()
        if alo >= ahi or blo >= bhi:
            continue

        match = _longest_match_in(a, alo, ahi, b, blo, bhi)
        if match.len == 0:
            # The whole window was searched, so nothing smaller can match
            continue

        matches.append(match)
        pending.append((alo, match.a_start, blo, match.b_start))
        pending.append((match.a_end, ahi, match.b_end, bhi))

    matches = [m for m in matches if m.len > 0]
    matches.sort(key=lambda m: (m.a_start, m.a_end, m.b_start, m.b_end))
    return matches


def similarity_ratio(a: Sequence, b: Sequence) -> float:
    """Similarity of two sequences as 2 * matched / (len(a) + len(b)).

    Two empty sequences are identical and score 1.0.

    Example:
        >>> similarity_ratio("abcd", "bcde")
        0.75
    """
    a = _as_sequence(a)
    b = _as_sequence(b)
    if not a and not b:
        return 1.0
    matched = sum(m.len for m in find_all_matches(a, b))
    return 2.0 * matched / (len(a) + len(b))


def score_candidates(key: Sequence, candidates: Iterable) -> list[ScoredCandidate]:
    """Score every candidate against `key`, keeping input order."""
    key = _as_sequence(key)
    return [
        ScoredCandidate(candidate=candidate, score=similarity_ratio(key, candidate))
        for candidate in candidates
    ]


def extract_close_matches(
    key: Sequence,
    candidates: Iterable,
    n: int = DEFAULT_MAX_SUGGESTIONS,
    cutoff: float = DEFAULT_CUTOFF,
) -> list:
    """Return up to `n` candidates closest to `key`, best first.

    Args:
        key: The (possibly mistyped) sequence to look up.
        candidates: Known-valid sequences to rank.
        n: Maximum number of results. `n <= 0` returns an empty list.
        cutoff: Minimum similarity ratio, inclusive.

    Returns:
        The original candidate values with score >= cutoff, sorted by score
        descending. Candidates with equal scores keep their input order.

    Example:
        >>> extract_close_matches("iterations", ["niterations", "iter", "abcdef"])
        ['niterations']
    """
    if n <= 0:
        return []

    scored = score_candidates(key, candidates)
    kept = [s for s in scored if s.score >= cutoff]
    # sort() is stable, which keeps ties in input order
    kept.sort(key=lambda s: s.score, reverse=True)

    logger.debug(
        f"{len(kept)} of {len(scored)} candidates scored >= {cutoff} for {key!r}"
    )
    return [s.candidate for s in kept[:n]]
