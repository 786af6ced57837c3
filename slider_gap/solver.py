"""End-to-end gap search: binarize, index, match, select."""
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .binarize import binarize_with_coordinates
from .buffer import PixelBuffer
from .config import DEFAULT_THRESHOLD, DEFAULT_TRAIT, GeometryTrait
from .debug import render_debug_overlay
from .errors import DebugRenderError, NoQualifyingPair
from .matcher import MatchPair, find_gap_candidates

logger = logging.getLogger(__name__)


@dataclass
class SolveResult:
    left_offset: int
    pairs: List[MatchPair] = field(default_factory=list)
    debug_image: Optional[PixelBuffer] = None
    debug_error: Optional[str] = None


def select_offset(pairs: List[MatchPair]) -> int:
    """Column of the first element of the first pair.

    This is not necessarily the left edge of the gap: callers that need it
    should compare both columns of the pair themselves.
    """
    if not pairs:
        raise NoQualifyingPair("No two candidate edges are a block width apart")
    return pairs[0].first.column


def solve(buffer: PixelBuffer, trait: GeometryTrait = DEFAULT_TRAIT,
          threshold=DEFAULT_THRESHOLD, debug: bool = False) -> SolveResult:
    # 1. Binarize in place and collect black pixels
    binary, black = binarize_with_coordinates(buffer, threshold)

    # 2. Find the edge pairs and take the first one
    pairs = find_gap_candidates(black, trait)
    result = SolveResult(left_offset=select_offset(pairs), pairs=pairs)
    logger.debug("Gap offset %d from %d pairs", result.left_offset, len(pairs))

    # 3. Optional overlay; its failures never touch the offset
    if debug:
        try:
            result.debug_image = render_debug_overlay(binary, pairs[0])
        except DebugRenderError as e:
            logger.warning("Debug overlay failed: %s", e)
            result.debug_error = str(e)
    return result
