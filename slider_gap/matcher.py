"""Detect the two vertical edges of the puzzle-piece gap."""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from .config import DEFAULT_TRAIT, GeometryTrait
from .errors import NoCandidatesFound
from .runs import Run, RunIndex, index_vertical_runs

logger = logging.getLogger(__name__)


class CandidateKind(str, Enum):
    FULL_LINE = "full_line"
    NOTCH_LINE = "notch_line"


@dataclass(frozen=True)
class Candidate:
    column: int
    kind: CandidateKind
    # The run(s) that earned the tag: one for a full line, (b, a) for a notch line
    runs: Tuple[Run, ...]


@dataclass(frozen=True)
class MatchPair:
    first: Candidate
    second: Candidate

    @property
    def distance(self) -> int:
        return abs(self.first.column - self.second.column)

    def __iter__(self):
        yield self.first
        yield self.second


def _first_with_length(runs: List[Run], length: int) -> Optional[Run]:
    for run in runs:
        if run.length == length:
            return run
    return None


def classify_columns(run_index: RunIndex, trait: GeometryTrait = DEFAULT_TRAIT) -> Tuple[List[Candidate], List[Candidate]]:
    """Split columns into full-line and notch-line candidates, ascending by column."""
    full, notch = [], []
    for column in sorted(run_index):
        runs = run_index[column]
        full_run = _first_with_length(runs, trait.full_line_length)
        notch_b = _first_with_length(runs, trait.notch_line_length.b)
        notch_a = _first_with_length(runs, trait.notch_line_length.a)
        if full_run is not None:
            full.append(Candidate(column, CandidateKind.FULL_LINE, (full_run,)))
        if notch_b is not None and notch_a is not None:
            notch.append(Candidate(column, CandidateKind.NOTCH_LINE, (notch_b, notch_a)))
    return full, notch


def _within_block_width(a: Candidate, b: Candidate, trait: GeometryTrait) -> bool:
    distance = abs(a.column - b.column)
    return trait.block_width.min < distance < trait.block_width.max


def pair_candidates(full: List[Candidate], notch: List[Candidate],
                    trait: GeometryTrait = DEFAULT_TRAIT) -> List[MatchPair]:
    """Pairs of candidates one block width apart, grouped by edge shape.

    Full/notch pairs come first (a notch on one side), then full/full pairs
    (no notch), then notch/notch pairs (a notch on both sides). Within a group
    pairs follow candidate order.
    """
    pairs = []

    for a in full:
        for b in notch:
            if _within_block_width(a, b, trait):
                pairs.append(MatchPair(a, b))

    for i, a in enumerate(full):
        for b in full[i + 1:]:
            if _within_block_width(a, b, trait):
                pairs.append(MatchPair(a, b))

    for i, a in enumerate(notch):
        for b in notch[i + 1:]:
            if _within_block_width(a, b, trait):
                pairs.append(MatchPair(a, b))

    return pairs


def find_gap_candidates(black_coordinates: Iterable, trait: GeometryTrait = DEFAULT_TRAIT) -> List[MatchPair]:
    """Every candidate pair for the gap edges, in priority order.

    Raises :class:`NoCandidatesFound` when no column looks like a piece edge.
    An empty list means edges were seen but none sit a block width apart.
    """
    run_index = index_vertical_runs(black_coordinates)
    full, notch = classify_columns(run_index, trait)
    logger.debug(
        "Indexed %d columns: %d full-line and %d notch-line candidates",
        len(run_index), len(full), len(notch),
    )
    if not full and not notch:
        raise NoCandidatesFound(
            f"No column has a run of {trait.full_line_length} pixels or runs of "
            f"{trait.notch_line_length.a} and {trait.notch_line_length.b} pixels"
        )
    pairs = pair_candidates(full, notch, trait)
    logger.debug("Found %d qualifying pairs", len(pairs))
    return pairs
