"""The set of systematic parameters considered when reweighting."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from nureweight.syst import Syst, as_string

__all__ = ["SystInfo", "SystSet"]

_log = logging.getLogger(__name__)


@dataclass
class SystInfo:
    """Current value, initial value, range and step of one systematic."""

    current: float = 0.0
    init: float = 0.0
    minimum: float = 0.0
    maximum: float = 0.0
    step: float = 0.0


class SystSet:
    """A collection of enabled systematics keyed by their dial."""

    def __init__(self) -> None:
        self._systs: dict[Syst, SystInfo] = {}

    def add(
        self,
        syst: Syst,
        init: float = 0.0,
        minimum: float = -1.0,
        maximum: float = 1.0,
        step: float = 0.05,
    ) -> None:
        """Enable a systematic, replacing any earlier entry; Syst.NULL is ignored."""
        if syst == Syst.NULL:
            return
        self._systs[syst] = SystInfo(init, init, minimum, maximum, step)

    def remove(self, syst: Syst) -> None:
        """Drop a systematic if present."""
        self._systs.pop(syst, None)

    def set(self, syst: Syst, value: float) -> None:
        """Set the current value, enabling the systematic with defaults if needed."""
        if syst not in self._systs:
            self.add(syst)
            if syst not in self._systs:
                return
        self._systs[syst].current = value

    def __len__(self) -> int:
        return len(self._systs)

    def __contains__(self, syst: object) -> bool:
        return syst in self._systs

    def included(self) -> list[Syst]:
        """All enabled systematics in dial order."""
        return sorted(self._systs)

    def info(self, syst: Syst) -> SystInfo | None:
        """The entry for a systematic, or None if it is not enabled."""
        return self._systs.get(syst)

    def describe(self) -> str:
        """A listing of the enabled systematics; also written to the log."""
        lines = [f"Considering {len(self)} systematics"]
        lines.extend(f"({i}) : {as_string(s)}" for i, s in enumerate(self.included()))
        text = "\n".join(lines)
        _log.info(text)
        return text

    def copy(self) -> SystSet:
        """An independent copy of this set."""
        other = SystSet()
        for syst in self.included():
            info = self._systs[syst]
            other.add(syst, info.init, info.minimum, info.maximum, info.step)
            other.set(syst, info.current)
        return other