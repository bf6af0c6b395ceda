"""
Tone scale: ordered tone names with numeric positions and one origin tone.
The origin tone is the interpolation pivot; its resolved color is the raw palette color.
"""
import math
from dataclasses import dataclass, field
from typing import Iterator, Mapping, Sequence

from ..errors import ThemeConfigError, UnknownTone
from .data.tables import DARK_POSITIONS, LIGHT_POSITIONS, ORIGIN, TONE_NAMES


@dataclass(frozen=True)
class ToneScale:
    """
    Ordered (name, position) pairs. Names are unique, positions non-decreasing,
    and the origin position lies strictly between the first and last positions.
    Order is the only ranking; numeric spacing may be uneven.
    """

    names: tuple[str, ...]
    positions: tuple[float, ...]
    origin: str = ORIGIN
    _index: dict[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        names = tuple(self.names)
        positions = tuple(float(p) for p in self.positions)
        object.__setattr__(self, "names", names)
        object.__setattr__(self, "positions", positions)
        if len(names) != len(positions):
            raise ThemeConfigError(
                f"Tone scale has {len(names)} names but {len(positions)} positions"
            )
        if len(names) < 3:
            raise ThemeConfigError("Tone scale needs at least 3 tones")
        if not all(math.isfinite(p) for p in positions):
            raise ThemeConfigError(f"Tone positions must be finite numbers: {list(positions)}")
        if len(set(names)) != len(names):
            raise ThemeConfigError(f"Tone names must be unique: {list(names)}")
        for prev, cur in zip(positions, positions[1:]):
            if cur < prev:
                raise ThemeConfigError(f"Tone positions must be non-decreasing: {list(positions)}")
        if self.origin not in names:
            raise ThemeConfigError(f"Origin tone {self.origin!r} is not in the scale")
        index = {name: i for i, name in enumerate(names)}
        origin_pos = positions[index[self.origin]]
        if not positions[0] < origin_pos < positions[-1]:
            raise ThemeConfigError(
                f"Origin position {origin_pos} must lie strictly between "
                f"{positions[0]} and {positions[-1]}"
            )
        object.__setattr__(self, "_index", index)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, float], origin: str = ORIGIN) -> "ToneScale":
        """Build from an ordered name -> position mapping (insertion order is tone order)."""
        return cls(tuple(mapping.keys()), tuple(mapping.values()), origin)

    def __len__(self) -> int:
        return len(self.names)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names)

    def __contains__(self, tone: object) -> bool:
        return tone in self._index

    def index_of(self, tone: str) -> int:
        try:
            return self._index[tone]
        except (KeyError, TypeError):
            raise UnknownTone(tone, self.names) from None

    def position_of(self, tone: str) -> float:
        return self.positions[self.index_of(tone)]

    def name_at(self, index: int) -> str:
        """Tone at index, clamped into [0, last_index]."""
        return self.names[max(0, min(index, self.last_index))]

    @property
    def last_index(self) -> int:
        return len(self.names) - 1

    @property
    def first(self) -> str:
        return self.names[0]

    @property
    def last(self) -> str:
        return self.names[-1]

    @property
    def origin_index(self) -> int:
        return self._index[self.origin]

    @property
    def origin_position(self) -> float:
        return self.positions[self.origin_index]

    @property
    def min_position(self) -> float:
        return self.positions[0]

    @property
    def max_position(self) -> float:
        return self.positions[-1]

    def to_dict(self) -> dict[str, object]:
        return {"origin": self.origin, "tones": dict(zip(self.names, self.positions))}


def default_scale(positions: Sequence[float] = LIGHT_POSITIONS) -> ToneScale:
    """Default twelve-tone scale with the given positions."""
    return ToneScale(tuple(TONE_NAMES), tuple(positions), ORIGIN)


def light_scale() -> ToneScale:
    return default_scale(LIGHT_POSITIONS)


def dark_scale() -> ToneScale:
    return default_scale(DARK_POSITIONS)
