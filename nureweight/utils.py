"""Event reweighting helper functions."""

from __future__ import annotations

from types import MappingProxyType

from nureweight.pdg import ion_pdg_to_a, is_ion, is_nucleon

__all__ = ["mean_free_path_weight", "agky_weight", "sign", "particle_a"]

# Per-species hadronization tweak factors; no species is tweaked, so every
# lookup falls back to the unit weight.
_AGKY_SPECIES_WEIGHTS = MappingProxyType({})


def mean_free_path_weight(prob_def: float, prob_twk: float, interacted: bool) -> float:
    """Weight for a change in a hadron's mean free path in the nuclear medium.

    ``prob_def`` is the nominal survival probability and ``prob_twk`` the
    survival probability with the tweaked mean free path. ``interacted``
    tells whether the hadron rescattered or escaped. The weight is never
    negative; degenerate nominal probabilities give a weight of one.
    """
    if interacted:
        weight = (1.0 - prob_twk) / (1.0 - prob_def) if 1.0 - prob_def > 0 else 1.0
    else:
        weight = prob_twk / prob_def if prob_def > 0 else 1.0
    return max(0.0, weight)


def agky_weight(pdgc: int, xf: float, pt2: float) -> float:
    """Weight for a hadronization tweak at the given (xF, pT^2); one for every species."""
    return float(_AGKY_SPECIES_WEIGHTS.get(pdgc, 1.0))


def sign(twkdial: float) -> int:
    """Sign of a tweak dial value: -1, 0 or +1."""
    if twkdial < 0.0:
        return -1
    if twkdial > 0.0:
        return 1
    return 0


def particle_a(pdg: int) -> int:
    """Nucleon number of a particle: 1 for nucleons, A for ions, else 0."""
    if is_nucleon(pdg):
        return 1
    if is_ion(pdg):
        return ion_pdg_to_a(pdg)
    return 0