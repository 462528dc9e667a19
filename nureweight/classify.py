"""Classification and lookup helpers for systematic tweak dials."""

from __future__ import annotations

from nureweight.pdg import (
    is_anti_neutrino,
    is_neutrino,
    is_neutron,
    is_nucleon,
    is_pion,
    is_proton,
)
from nureweight.syst import HadronFate, InteractionType, Syst

__all__ = [
    "is_inuke_pion_fate",
    "is_inuke_nucleon_fate",
    "is_inuke_fate",
    "is_inuke_pion_mean_free_path",
    "is_inuke_nucleon_mean_free_path",
    "is_inuke_mean_free_path",
    "next_pion_fate",
    "next_nucleon_fate",
    "inuke_fate_to_syst",
    "non_resonant_background",
]

_PION_FATES = (
    Syst.FR_CEX_PI,
    Syst.FR_INEL_PI,
    Syst.FR_ABS_PI,
    Syst.FR_PIPROD_PI,
)
_NUCLEON_FATES = (
    Syst.FR_CEX_N,
    Syst.FR_INEL_N,
    Syst.FR_ABS_N,
    Syst.FR_PIPROD_N,
)

_PION_FATE_MAP = {
    HadronFate.CEX: Syst.FR_CEX_PI,
    HadronFate.INELASTIC: Syst.FR_INEL_PI,
    HadronFate.ABSORPTION: Syst.FR_ABS_PI,
    HadronFate.PION_PRODUCTION: Syst.FR_PIPROD_PI,
}
_NUCLEON_FATE_MAP = {
    HadronFate.CEX: Syst.FR_CEX_N,
    HadronFate.INELASTIC: Syst.FR_INEL_N,
    HadronFate.ABSORPTION: Syst.FR_ABS_N,
    HadronFate.PION_PRODUCTION: Syst.FR_PIPROD_N,
}

# (interaction, is antineutrino, is neutron, pion multiplicity) -> dial
_RBKG = {
    (InteractionType.WEAK_CC, False, False, 1): Syst.RVP_CC1PI,
    (InteractionType.WEAK_CC, False, False, 2): Syst.RVP_CC2PI,
    (InteractionType.WEAK_CC, False, True, 1): Syst.RVN_CC1PI,
    (InteractionType.WEAK_CC, False, True, 2): Syst.RVN_CC2PI,
    (InteractionType.WEAK_CC, True, False, 1): Syst.RVBARP_CC1PI,
    (InteractionType.WEAK_CC, True, False, 2): Syst.RVBARP_CC2PI,
    (InteractionType.WEAK_CC, True, True, 1): Syst.RVBARN_CC1PI,
    (InteractionType.WEAK_CC, True, True, 2): Syst.RVBARN_CC2PI,
    (InteractionType.WEAK_NC, False, False, 1): Syst.RVP_NC1PI,
    (InteractionType.WEAK_NC, False, False, 2): Syst.RVP_NC2PI,
    (InteractionType.WEAK_NC, False, True, 1): Syst.RVN_NC1PI,
    (InteractionType.WEAK_NC, False, True, 2): Syst.RVN_NC2PI,
    (InteractionType.WEAK_NC, True, False, 1): Syst.RVBARP_NC1PI,
    (InteractionType.WEAK_NC, True, False, 2): Syst.RVBARP_NC2PI,
    (InteractionType.WEAK_NC, True, True, 1): Syst.RVBARN_NC1PI,
    (InteractionType.WEAK_NC, True, True, 2): Syst.RVBARN_NC2PI,
}


def is_inuke_pion_fate(syst: Syst) -> bool:
    """True for the pion rescattering fate dials."""
    return syst in _PION_FATES


def is_inuke_nucleon_fate(syst: Syst) -> bool:
    """True for the nucleon rescattering fate dials."""
    return syst in _NUCLEON_FATES


def is_inuke_fate(syst: Syst) -> bool:
    """True for any hadron rescattering fate dial."""
    return is_inuke_pion_fate(syst) or is_inuke_nucleon_fate(syst)


def is_inuke_pion_mean_free_path(syst: Syst) -> bool:
    """True for the pion mean free path dial."""
    return syst == Syst.MFP_PI


def is_inuke_nucleon_mean_free_path(syst: Syst) -> bool:
    """True for the nucleon mean free path dial."""
    return syst == Syst.MFP_N


def is_inuke_mean_free_path(syst: Syst) -> bool:
    """True for either mean free path dial."""
    return is_inuke_pion_mean_free_path(syst) or is_inuke_nucleon_mean_free_path(syst)


def _nth(fates: tuple[Syst, ...], i: int) -> Syst:
    return fates[i] if 0 <= i < len(fates) else Syst.NULL


def next_pion_fate(i: int) -> Syst:
    """The i-th pion fate dial, or Syst.NULL past the last one."""
    return _nth(_PION_FATES, i)


def next_nucleon_fate(i: int) -> Syst:
    """The i-th nucleon fate dial, or Syst.NULL past the last one."""
    return _nth(_NUCLEON_FATES, i)


def inuke_fate_to_syst(fate: HadronFate, pdgc: int) -> Syst:
    """The fate dial for a rescattering fate of the given hadron."""
    if is_pion(pdgc):
        return _PION_FATE_MAP.get(fate, Syst.NULL)
    if is_nucleon(pdgc):
        return _NUCLEON_FATE_MAP.get(fate, Syst.NULL)
    return Syst.NULL


def non_resonant_background(
    itype: InteractionType, probe: int, hitnuc: int, npi: int
) -> Syst:
    """The non-resonant background dial for a probe, hit nucleon and pion count."""
    if is_neutrino(probe):
        anti = False
    elif is_anti_neutrino(probe):
        anti = True
    else:
        return Syst.NULL
    if is_proton(hitnuc):
        neutron = False
    elif is_neutron(hitnuc):
        neutron = True
    else:
        return Syst.NULL
    return _RBKG.get((itype, anti, neutron, npi), Syst.NULL)