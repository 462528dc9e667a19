"""One-sigma uncertainties of the systematic tweak dials."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from nureweight.syst import Syst, as_string

__all__ = ["UncertaintyEntry", "UncertaintyTable", "SystUncertainty"]

_log = logging.getLogger(__name__)

_PLUS_SUFFIX = "@PlusOneSigma"
_MINUS_SUFFIX = "@MinusOneSigma"


@dataclass
class UncertaintyEntry:
    """A pair of plus and minus one-sigma errors for one dial."""

    plus_one_sigma: float = 0.0
    minus_one_sigma: float = 0.0


class UncertaintyTable:
    """Table of one-sigma errors for every named dial, read from a parameter map.

    Parameters are looked up under ``"<dial name>@PlusOneSigma"`` and
    ``"<dial name>@MinusOneSigma"``; a missing entry counts as zero.
    """

    def __init__(self, params: Mapping[str, float] | None = None) -> None:
        self._errors: dict[Syst, UncertaintyEntry] = {}
        self.configure(params)

    def configure(self, params: Mapping[str, float] | None) -> None:
        """Load the errors of every named dial from ``params``."""
        params = params or {}
        for syst in Syst:
            if syst in (Syst.NULL, Syst.N_TWK_DIALS) or syst >= Syst.N_TWK_DIALS:
                continue
            name = as_string(syst)
            if name == "-":
                _log.info("Skipping deprecated tweak dial knob for %s", syst.name)
                continue
            plus_err = float(params.get(name + _PLUS_SUFFIX, 0.0))
            minus_err = float(params.get(name + _MINUS_SUFFIX, 0.0))
            self._errors[syst] = UncertaintyEntry(plus_err, minus_err)
            _log.info(
                "Reweight parameter %s has one-sigma uncertainties +%s, -%s",
                name,
                plus_err,
                minus_err,
            )

    def errors(self) -> dict[Syst, UncertaintyEntry]:
        """The live mapping from dial to its errors."""
        return self._errors


class SystUncertainty:
    """Looks up the one-sigma uncertainty of a dial; one shared instance by default."""

    _instance: SystUncertainty | None = None

    def __init__(self, table: UncertaintyTable | None = None) -> None:
        self._table = table if table is not None else UncertaintyTable()

    @classmethod
    def instance(cls) -> SystUncertainty:
        """The shared instance, created with default errors on first use."""
        if cls._instance is None:
            _log.info("SystUncertainty late initialization")
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the shared instance so the next call creates a fresh one."""
        cls._instance = None

    def one_sigma_err(self, syst: Syst, sign: int = 0) -> float:
        """The plus (sign > 0), minus (sign < 0) or mean (sign == 0) error; 0 if unknown."""
        entry = self._table.errors().get(syst)
        if entry is None:
            return 0.0
        if sign > 0:
            return entry.plus_one_sigma
        if sign < 0:
            return entry.minus_one_sigma
        return 0.5 * (entry.plus_one_sigma + entry.minus_one_sigma)

    def set_uncertainty(self, syst: Syst, plus_err: float, minus_err: float) -> None:
        """Replace the errors of a dial."""
        _log.info(
            "Setting uncertainties for Reweight tweak dial %s to +%s, -%s",
            as_string(syst),
            plus_err,
            minus_err,
        )
        self._table.errors()[syst] = UncertaintyEntry(plus_err, minus_err)