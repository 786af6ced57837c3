"""Geometry of the puzzle piece and the binarization threshold."""
from dataclasses import dataclass, field

DEFAULT_THRESHOLD = 100


@dataclass(frozen=True)
class NotchLineLength:
    # Lengths of the two edge segments left when the circular notch cuts the edge
    a: int = 29
    b: int = 27


@dataclass(frozen=True)
class BlockWidth:
    # Exclusive bounds on the distance between the two piece edges
    min: int = 83
    max: int = 87


@dataclass(frozen=True)
class GeometryTrait:
    full_line_length: int = 87
    notch_line_length: NotchLineLength = field(default_factory=NotchLineLength)
    block_width: BlockWidth = field(default_factory=BlockWidth)

    def __post_init__(self):
        lengths = (
            self.full_line_length,
            self.notch_line_length.a,
            self.notch_line_length.b,
        )
        if any(int(n) != n or n <= 0 for n in lengths):
            raise ValueError(f"Line lengths must be positive integers, got {lengths}")
        if self.block_width.min < 0 or self.block_width.min >= self.block_width.max:
            raise ValueError(
                f"Block width bounds must satisfy 0 <= min < max, got "
                f"min={self.block_width.min} max={self.block_width.max}"
            )

    @classmethod
    def from_dict(cls, data: dict) -> "GeometryTrait":
        """Build a trait from the JSON shape ``{"fullLineLength": 87, "notchLineLength": {"a": 29, "b": 27}, "blockWidth": {"min": 83, "max": 87}}``.

        Snake-case keys are accepted too; missing or null keys keep their defaults.
        """
        default = cls()

        def pick(source, *keys, fallback):
            for key in keys:
                if source.get(key) is not None:
                    return source[key]
            return fallback

        notch = pick(data, "notchLineLength", "notch_line_length", fallback={})
        width = pick(data, "blockWidth", "block_width", fallback={})
        if not isinstance(notch, dict) or not isinstance(width, dict):
            raise ValueError("notchLineLength and blockWidth must be objects")
        return cls(
            full_line_length=int(pick(data, "fullLineLength", "full_line_length",
                                      fallback=default.full_line_length)),
            notch_line_length=NotchLineLength(
                a=int(pick(notch, "a", fallback=default.notch_line_length.a)),
                b=int(pick(notch, "b", fallback=default.notch_line_length.b)),
            ),
            block_width=BlockWidth(
                min=int(pick(width, "min", fallback=default.block_width.min)),
                max=int(pick(width, "max", fallback=default.block_width.max)),
            ),
        )


DEFAULT_TRAIT = GeometryTrait()
