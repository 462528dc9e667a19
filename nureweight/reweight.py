"""The reweighting engine and the interface of its weight calculators."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from nureweight.syst import Syst, as_string
from nureweight.systset import SystSet

__all__ = ["WeightCalculator", "ReWeight"]

_log = logging.getLogger(__name__)


class WeightCalculator(ABC):
    """Interface of a concrete event weight calculator."""

    @abstractmethod
    def applies_to(self, event: Any) -> bool:
        """Whether this calculator handles this kind of event."""

    @abstractmethod
    def is_handled(self, syst: Syst) -> bool:
        """Whether this calculator handles the given dial."""

    @abstractmethod
    def set_systematic(self, syst: Syst, value: float) -> None:
        """Update the value of a dial."""

    @abstractmethod
    def reset(self) -> None:
        """Return all dials to their defaults."""

    @abstractmethod
    def reconfigure(self) -> None:
        """Propagate updated dial values to the underlying model."""

    @abstractmethod
    def calc_weight(self, event: Any) -> float:
        """Weight of an event for the current dial values."""

    @abstractmethod
    def use_old_weight_from_file(self, flag: bool) -> None:
        """Choose whether to take the old weight from the input instead of recomputing it."""

    @abstractmethod
    def set_n_weight_checks(self, n: int) -> None:
        """How many times to check a stored weight by recomputing it."""


class ReWeight:
    """Combines named weight calculators under one set of systematics."""

    def __init__(self) -> None:
        self._systs = SystSet()
        self._calculators: dict[str, WeightCalculator] = {}
        self._names: list[str] = []

    def adopt(self, name: str, calculator: WeightCalculator | None) -> None:
        """Add a calculator; an existing calculator of that name is kept."""
        if calculator is None:
            return
        self._calculators.setdefault(name, calculator)
        if name not in self._names:
            self._names.append(name)

    def calculator(self, name: str) -> WeightCalculator | None:
        """The calculator of that name, or None."""
        return self._calculators.get(name)

    def systematics(self) -> SystSet:
        """The set of enabled systematics and their values."""
        return self._systs

    def _ordered(self):
        return sorted(self._calculators.items())

    def reconfigure(self) -> None:
        """Pass every enabled dial value to each calculator, then reconfigure it."""
        _log.info("Reconfiguring ...")
        included = self._systs.included()
        for _, calc in self._ordered():
            for syst in included:
                calc.set_systematic(syst, self._systs.info(syst).current)
            calc.reconfigure()
        _log.debug("Done reconfiguring")

    def calc_weight(self, event: Any) -> float:
        """Product of the weights of all calculators for an event."""
        weight = 1.0
        for name, calc in self._ordered():
            w = calc.calc_weight(event)
            _log.info("Calculator: %s => wght = %s", name, w)
            weight *= w
        return weight

    def describe(self) -> str:
        """A listing of the current systematic values; also written to the log."""
        lines = ["Current set of systematic params:"]
        lines.extend(
            f" --o {as_string(s)} is set at {self._systs.info(s).current}"
            for s in self._systs.included()
        )
        text = "\n".join(lines)
        _log.info(text)
        return text

    def calculator_names(self) -> list[str]:
        """Names of the adopted calculators in the order first added."""
        return list(self._names)