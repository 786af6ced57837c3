"""Locate the puzzle-piece gap in slider captcha backgrounds."""
from .binarize import Coordinate, binarize, binarize_with_coordinates, black_pixel_coordinates
from .buffer import PixelBuffer, decode_base64_image, decode_image_bytes, encode_png_base64
from .config import DEFAULT_THRESHOLD, DEFAULT_TRAIT, BlockWidth, GeometryTrait, NotchLineLength
from .debug import render_debug_overlay
from .errors import (
    DebugRenderError,
    InvalidBufferFormat,
    NoCandidatesFound,
    NoQualifyingPair,
    SliderGapError,
)
from .matcher import Candidate, CandidateKind, MatchPair, classify_columns, find_gap_candidates, pair_candidates
from .runs import Run, index_vertical_runs
from .solver import SolveResult, select_offset, solve

__all__ = [
    "BlockWidth",
    "Candidate",
    "CandidateKind",
    "Coordinate",
    "DEFAULT_THRESHOLD",
    "DEFAULT_TRAIT",
    "DebugRenderError",
    "GeometryTrait",
    "InvalidBufferFormat",
    "MatchPair",
    "NoCandidatesFound",
    "NoQualifyingPair",
    "NotchLineLength",
    "PixelBuffer",
    "Run",
    "SliderGapError",
    "SolveResult",
    "binarize",
    "binarize_with_coordinates",
    "black_pixel_coordinates",
    "classify_columns",
    "decode_base64_image",
    "decode_image_bytes",
    "encode_png_base64",
    "find_gap_candidates",
    "index_vertical_runs",
    "pair_candidates",
    "render_debug_overlay",
    "select_offset",
    "solve",
]
