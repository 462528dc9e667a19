"""Particle-code predicates used by the reweighting utilities."""

from __future__ import annotations

__all__ = [
    "PION_PLUS",
    "PION_MINUS",
    "PION_ZERO",
    "PROTON",
    "NEUTRON",
    "NU_E",
    "NU_MU",
    "NU_TAU",
    "CLUSTER_NN",
    "CLUSTER_NP",
    "CLUSTER_PP",
    "is_pion",
    "is_proton",
    "is_neutron",
    "is_nucleon",
    "is_neutrino",
    "is_anti_neutrino",
    "is_ion",
    "ion_pdg_to_a",
    "ion_pdg_to_z",
    "is_two_nucleon_cluster",
]

PION_PLUS = 211
PION_MINUS = -211
PION_ZERO = 111
PROTON = 2212
NEUTRON = 2112
NU_E = 12
NU_MU = 14
NU_TAU = 16
CLUSTER_NN = 2000000200
CLUSTER_NP = 2000000201
CLUSTER_PP = 2000000202

_PIONS = frozenset({PION_PLUS, PION_MINUS, PION_ZERO})
_NEUTRINOS = frozenset({NU_E, NU_MU, NU_TAU})
_ANTI_NEUTRINOS = frozenset(-code for code in _NEUTRINOS)
_CLUSTERS = frozenset({CLUSTER_NN, CLUSTER_NP, CLUSTER_PP})

_ION_MIN = 1000000000
_ION_MAX = 1999999999


def is_pion(pdg: int) -> bool:
    """True for charged or neutral pions."""
    return pdg in _PIONS


def is_proton(pdg: int) -> bool:
    """True for the proton."""
    return pdg == PROTON


def is_neutron(pdg: int) -> bool:
    """True for the neutron."""
    return pdg == NEUTRON


def is_nucleon(pdg: int) -> bool:
    """True for a proton or neutron."""
    return is_proton(pdg) or is_neutron(pdg)


def is_neutrino(pdg: int) -> bool:
    """True for the three neutrino flavours."""
    return pdg in _NEUTRINOS


def is_anti_neutrino(pdg: int) -> bool:
    """True for the three anti-neutrino flavours."""
    return pdg in _ANTI_NEUTRINOS


def is_ion(pdg: int) -> bool:
    """True for a nuclear code of the form 10LZZZAAAI."""
    return _ION_MIN < pdg < _ION_MAX


def ion_pdg_to_a(pdg: int) -> int:
    """Mass number encoded in an ion code."""
    return (pdg // 10) % 1000


def ion_pdg_to_z(pdg: int) -> int:
    """Atomic number encoded in an ion code."""
    return (pdg // 10000) % 1000


def is_two_nucleon_cluster(pdg: int) -> bool:
    """True for the nn, np and pp two-nucleon cluster codes."""
    return pdg in _CLUSTERS