"""Overlay of the matched piece edges, for eyeballing a result."""
from .buffer import PixelBuffer
from .errors import DebugRenderError
from .matcher import MatchPair

MARKER_COLOR = (255, 0, 0)


def render_debug_overlay(buffer: PixelBuffer, pair: MatchPair, color=MARKER_COLOR) -> PixelBuffer:
    """Return a copy of ``buffer`` with the runs of ``pair`` painted in ``color``.

    Each run is painted from its first row through its last row.
    Alpha is left as it is.
    """
    try:
        overlay = buffer.copy()
        data = overlay.data
        for candidate in pair:
            x = candidate.column
            if not 0 <= x < overlay.width:
                raise DebugRenderError(f"Column {x} lies outside a {overlay.width} pixel wide image")
            for run in candidate.runs:
                top = max(run.start_row, 0)
                bottom = min(run.current_row + 1, overlay.height)
                data[top:bottom, x, :3] = color
        return overlay
    except DebugRenderError:
        raise
    except Exception as e:
        raise DebugRenderError(f"Error drawing debug overlay: {e}") from e
