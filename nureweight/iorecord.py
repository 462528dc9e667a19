"""Records of reweighting results stored per event, and branch descriptions."""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = ["BranchDesc", "WeightInfo", "IORecord"]


@dataclass
class BranchDesc:
    """Describes the parameter behind one branch of stored weights."""

    name: str = ""
    mean: float = 0.0
    sigma_plus: float = 0.0
    sigma_minus: float = 0.0

    def set_parameter(
        self, name: str, mean: float, sigma_plus: float, sigma_minus: float
    ) -> None:
        """Replace the parameter's name, mean and one-sigma errors."""
        self.name = name
        self.mean = mean
        self.sigma_plus = sigma_plus
        self.sigma_minus = sigma_minus


@dataclass(frozen=True)
class WeightInfo:
    """A tweak dial value and the weight it produced."""

    tweak: float = 0.0
    weight: float = 1.0


@dataclass
class IORecord:
    """The reweighting results of one event, in the order they were computed."""

    original_event_number: int = -1
    results: list[WeightInfo] = field(default_factory=list)

    def __init__(self) -> None:
        self.original_event_number = -1
        self.results = []

    def reset(self) -> None:
        """Forget the event number and all results."""
        self.original_event_number = -1
        self.results.clear()

    def copy_from(self, other: IORecord) -> None:
        """Make this record an independent copy of ``other``."""
        self.reset()
        self.original_event_number = other.original_event_number
        self.results = list(other.results)

    def insert(self, tweak: float, weight: float) -> None:
        """Append the weight obtained for a tweak dial value."""
        self.results.append(WeightInfo(tweak, weight))

    def __len__(self) -> int:
        return len(self.results)

    def _at(self, i: int) -> WeightInfo:
        if 0 <= i < len(self.results):
            return self.results[i]
        return WeightInfo()

    def tweak(self, i: int) -> float:
        """The i-th tweak dial value, or 0 if there is no such result."""
        return self._at(i).tweak

    def weight(self, i: int) -> float:
        """The i-th weight, or 1 if there is no such result."""
        return self._at(i).weight