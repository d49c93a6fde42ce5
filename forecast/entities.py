from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Dict, List, Mapping, Optional, Sequence

from forecast.errors import MalformedResponseError


@dataclass(frozen=True)
class Coordinates:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class HourlySeries:
    """Raw hourly arrays as returned by the provider.

    ``times`` holds ISO-8601 timestamps in the request timezone and
    ``values`` maps each provider field key to a sequence of the same length.
    Missing readings are kept as ``None``; only the fields a caller asked
    for are guaranteed to be numeric.
    """

    times: List[str]
    values: Dict[str, List[Optional[float]]] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.times)

    def series(self, key: str) -> List[Optional[float]]:
        try:
            return self.values[key]
        except KeyError:
            raise MalformedResponseError(f"missing hourly.{key}") from None


@dataclass(frozen=True)
class ResultPoint:
    """One display point: a label, the converted value and its dense index."""

    time: str
    value: float
    hour: int

    def as_dict(self) -> Mapping[str, object]:
        return asdict(self)


def renumber(points: Sequence[ResultPoint]) -> List[ResultPoint]:
    return [ResultPoint(time=p.time, value=p.value, hour=idx) for idx, p in enumerate(points)]


__all__ = ["Coordinates", "HourlySeries", "ResultPoint", "renumber"]
