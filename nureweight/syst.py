"""Enumeration of systematic tweak dials and their string names."""

from __future__ import annotations

from enum import Enum, IntEnum, auto

__all__ = ["Syst", "InteractionType", "HadronFate", "as_string", "from_string"]


class InteractionType(Enum):
    """Interaction types that the reweighting dials distinguish."""

    WEAK_CC = auto()
    WEAK_NC = auto()
    EM = auto()


class HadronFate(Enum):
    """Fates of a hadron rescattering inside the nucleus."""

    UNDEFINED = auto()
    CEX = auto()
    ELASTIC = auto()
    INELASTIC = auto()
    ABSORPTION = auto()
    PION_PRODUCTION = auto()


class Syst(IntEnum):
    """Systematic parameters (tweak dials), in their fixed numbering order."""

    NULL = 0

    # NCEL
    MA_NCEL = auto()
    ETA_NCEL = auto()
    # CCQE
    NORM_CCQE = auto()
    NORM_CCQE_ENU = auto()
    MA_CCQE_SHAPE = auto()
    MA_CCQE = auto()
    VEC_FF_CCQE_SHAPE = auto()
    # Resonance production
    NORM_CCRES = auto()
    MA_CCRES_SHAPE = auto()
    MV_CCRES_SHAPE = auto()
    MA_CCRES = auto()
    MV_CCRES = auto()
    NORM_NCRES = auto()
    MA_NCRES_SHAPE = auto()
    MV_NCRES_SHAPE = auto()
    MA_NCRES = auto()
    MV_NCRES = auto()
    # Coherent pion production
    MA_COHPI = auto()
    R0_COHPI = auto()
    # Non-resonant background
    RVP_CC1PI = auto()
    RVP_CC2PI = auto()
    RVP_NC1PI = auto()
    RVP_NC2PI = auto()
    RVN_CC1PI = auto()
    RVN_CC2PI = auto()
    RVN_NC1PI = auto()
    RVN_NC2PI = auto()
    RVBARP_CC1PI = auto()
    RVBARP_CC2PI = auto()
    RVBARP_NC1PI = auto()
    RVBARP_NC2PI = auto()
    RVBARN_CC1PI = auto()
    RVBARN_CC2PI = auto()
    RVBARN_NC1PI = auto()
    RVBARN_NC2PI = auto()
    # DIS
    AHT_BY = auto()
    BHT_BY = auto()
    CV1U_BY = auto()
    CV2U_BY = auto()
    AHT_BY_SHAPE = auto()
    BHT_BY_SHAPE = auto()
    CV1U_BY_SHAPE = auto()
    CV2U_BY_SHAPE = auto()
    NORM_DIS_CC = auto()
    RNUBARNU_CC = auto()
    DIS_NUCL_MOD = auto()
    NC = auto()
    # Hadronization
    AGKY_XF1PI = auto()
    AGKY_PT1PI = auto()
    # Medium effects to hadronization
    FORM_ZONE = auto()
    # Intranuclear rescattering
    MFP_PI = auto()
    MFP_N = auto()
    FR_CEX_PI = auto()
    INVALID_FR_ELAS_PI = auto()
    FR_INEL_PI = auto()
    FR_ABS_PI = auto()
    FR_PIPROD_PI = auto()
    FR_CEX_N = auto()
    INVALID_FR_ELAS_N = auto()
    FR_INEL_N = auto()
    FR_ABS_N = auto()
    FR_PIPROD_N = auto()
    # Nuclear model
    CCQE_PAULI_SUP_VIA_KF = auto()
    CCQE_MOM_DISTRO_FG_TO_SF = auto()
    # Resonance decays
    BR1_GAMMA = auto()
    BR1_ETA = auto()
    THETA_DELTA2NPI = auto()
    # CCQE axial form factor, z-expansion
    ZNORM_CCQE = auto()
    ZEXP_A1_CCQE = auto()
    ZEXP_A2_CCQE = auto()
    ZEXP_A3_CCQE = auto()
    ZEXP_A4_CCQE = auto()
    AXFF_CCQE_SHAPE = auto()
    # CCQE running axial mass
    E0_CCQE_SHAPE = auto()
    E0_CCQE = auto()
    # Empirical MEC
    EMPMEC_MQ2D = auto()
    EMPMEC_MASS = auto()
    EMPMEC_WIDTH = auto()
    EMPMEC_FRACPN_NC = auto()
    EMPMEC_FRACPN_CC = auto()
    EMPMEC_FRAC_CCQE = auto()
    EMPMEC_FRAC_NCQE = auto()
    EMPMEC_FRACPN_EM = auto()
    EMPMEC_FRAC_EMQE = auto()
    # General MEC
    NORM_CCMEC = auto()
    NORM_NCMEC = auto()
    NORM_EMMEC = auto()
    DECAY_ANG_MEC = auto()
    FRACPN_CCMEC = auto()
    FRAC_DELTA_CCMEC = auto()
    XSEC_SHAPE_CCMEC = auto()
    RPA_CCQE = auto()
    THETA_DELTA2NRAD = auto()
    COULOMB_CCQE = auto()
    NORM_CCCOHPI = auto()
    NORM_NCCOHPI = auto()
    # CCQE vector form factor, z-expansion
    ZEXP_ELFF = auto()
    ZEXP_ELFF_AP1 = auto()
    ZEXP_ELFF_AP2 = auto()
    ZEXP_ELFF_AP3 = auto()
    ZEXP_ELFF_AP4 = auto()
    ZEXP_ELFF_AN1 = auto()
    ZEXP_ELFF_AN2 = auto()
    ZEXP_ELFF_AN3 = auto()
    ZEXP_ELFF_AN4 = auto()
    ZEXP_ELFF_BP1 = auto()
    ZEXP_ELFF_BP2 = auto()
    ZEXP_ELFF_BP3 = auto()
    ZEXP_ELFF_BP4 = auto()
    ZEXP_ELFF_BN1 = auto()
    ZEXP_ELFF_BN2 = auto()
    ZEXP_ELFF_BN3 = auto()
    ZEXP_ELFF_BN4 = auto()

    # Not real dials: end marker and the Professor reweighting tag
    N_TWK_DIALS = auto()
    PROF_REW = auto()


_NAMES: dict[Syst, str] = {
    Syst.MA_NCEL: "MaNCEL",
    Syst.ETA_NCEL: "EtaNCEL",
    Syst.NORM_CCQE: "NormCCQE",
    Syst.NORM_CCQE_ENU: "NormCCQEenu",
    Syst.MA_CCQE: "MaCCQE",
    Syst.MA_CCQE_SHAPE: "MaCCQEshape",
    Syst.E0_CCQE: "E0CCQE",
    Syst.E0_CCQE_SHAPE: "E0CCQEshape",
    Syst.ZNORM_CCQE: "ZNormCCQE",
    Syst.ZEXP_A1_CCQE: "ZExpA1CCQE",
    Syst.ZEXP_A2_CCQE: "ZExpA2CCQE",
    Syst.ZEXP_A3_CCQE: "ZExpA3CCQE",
    Syst.ZEXP_A4_CCQE: "ZExpA4CCQE",
    Syst.AXFF_CCQE_SHAPE: "AxFFCCQEshape",
    Syst.VEC_FF_CCQE_SHAPE: "VecFFCCQEshape",
    Syst.NORM_CCRES: "NormCCRES",
    Syst.MA_CCRES_SHAPE: "MaCCRESshape",
    Syst.MV_CCRES_SHAPE: "MvCCRESshape",
    Syst.MA_CCRES: "MaCCRES",
    Syst.MV_CCRES: "MvCCRES",
    Syst.NORM_NCRES: "NormNCRES",
    Syst.MA_NCRES_SHAPE: "MaNCRESshape",
    Syst.MV_NCRES_SHAPE: "MvNCRESshape",
    Syst.MA_NCRES: "MaNCRES",
    Syst.MV_NCRES: "MvNCRES",
    Syst.MA_COHPI: "MaCOHpi",
    Syst.R0_COHPI: "R0COHpi",
    Syst.RVP_CC1PI: "NonRESBGvpCC1pi",
    Syst.RVP_CC2PI: "NonRESBGvpCC2pi",
    Syst.RVP_NC1PI: "NonRESBGvpNC1pi",
    Syst.RVP_NC2PI: "NonRESBGvpNC2pi",
    Syst.RVN_CC1PI: "NonRESBGvnCC1pi",
    Syst.RVN_CC2PI: "NonRESBGvnCC2pi",
    Syst.RVN_NC1PI: "NonRESBGvnNC1pi",
    Syst.RVN_NC2PI: "NonRESBGvnNC2pi",
    Syst.RVBARP_CC1PI: "NonRESBGvbarpCC1pi",
    Syst.RVBARP_CC2PI: "NonRESBGvbarpCC2pi",
    Syst.RVBARP_NC1PI: "NonRESBGvbarpNC1pi",
    Syst.RVBARP_NC2PI: "NonRESBGvbarpNC2pi",
    Syst.RVBARN_CC1PI: "NonRESBGvbarnCC1pi",
    Syst.RVBARN_CC2PI: "NonRESBGvbarnCC2pi",
    Syst.RVBARN_NC1PI: "NonRESBGvbarnNC1pi",
    Syst.RVBARN_NC2PI: "NonRESBGvbarnNC2pi",
    Syst.AHT_BY: "AhtBY",
    Syst.BHT_BY: "BhtBY",
    Syst.CV1U_BY: "CV1uBY",
    Syst.CV2U_BY: "CV2uBY",
    Syst.AHT_BY_SHAPE: "AhtBYshape",
    Syst.BHT_BY_SHAPE: "BhtBYshape",
    Syst.CV1U_BY_SHAPE: "CV1uBYshape",
    Syst.CV2U_BY_SHAPE: "CV2uBYshape",
    Syst.NORM_DIS_CC: "NormDISCC",
    Syst.RNUBARNU_CC: "RnubarnuCC",
    Syst.DIS_NUCL_MOD: "DISNuclMod",
    Syst.NC: "NC",
    Syst.AGKY_XF1PI: "AGKYxF1pi",
    Syst.AGKY_PT1PI: "AGKYpT1pi",
    Syst.FORM_ZONE: "FormZone",
    Syst.MFP_PI: "MFP_pi",
    Syst.MFP_N: "MFP_N",
    Syst.FR_CEX_PI: "FrCEx_pi",
    Syst.FR_INEL_PI: "FrInel_pi",
    Syst.FR_ABS_PI: "FrAbs_pi",
    Syst.FR_PIPROD_PI: "FrPiProd_pi",
    Syst.FR_CEX_N: "FrCEx_N",
    Syst.FR_INEL_N: "FrInel_N",
    Syst.FR_ABS_N: "FrAbs_N",
    Syst.FR_PIPROD_N: "FrPiProd_N",
    Syst.CCQE_PAULI_SUP_VIA_KF: "CCQEPauliSupViaKF",
    Syst.CCQE_MOM_DISTRO_FG_TO_SF: "CCQEMomDistroFGtoSF",
    Syst.BR1_GAMMA: "RDecBR1gamma",
    Syst.BR1_ETA: "RDecBR1eta",
    Syst.THETA_DELTA2NPI: "Theta_Delta2Npi",
    Syst.EMPMEC_MQ2D: "EmpMEC_Mq2d",
    Syst.EMPMEC_MASS: "EmpMEC_Mass",
    Syst.EMPMEC_WIDTH: "EmpMEC_Width",
    Syst.EMPMEC_FRACPN_NC: "EmpMEC_FracPN_NC",
    Syst.EMPMEC_FRACPN_CC: "EmpMEC_FracPN_CC",
    Syst.EMPMEC_FRAC_CCQE: "EmpMEC_FracCCQE",
    Syst.EMPMEC_FRAC_NCQE: "EmpMEC_FracNCQE",
    Syst.EMPMEC_FRACPN_EM: "EmpMEC_FracPN_EM",
    Syst.EMPMEC_FRAC_EMQE: "EmpMEC_FracEMQE",
    Syst.NORM_CCMEC: "NormCCMEC",
    Syst.NORM_NCMEC: "NormNCMEC",
    Syst.NORM_EMMEC: "NormEMMEC",
    Syst.DECAY_ANG_MEC: "DecayAngMEC",
    Syst.FRACPN_CCMEC: "FracPN_CCMEC",
    Syst.FRAC_DELTA_CCMEC: "FracDelta_CCMEC",
    Syst.XSEC_SHAPE_CCMEC: "XSecShape_CCMEC",
    Syst.RPA_CCQE: "RPA_CCQE",
    Syst.THETA_DELTA2NRAD: "ThetaDelta2NRad",
    Syst.COULOMB_CCQE: "CoulombCCQE",
    Syst.NORM_CCCOHPI: "NormCCCOH",
    Syst.NORM_NCCOHPI: "NormNCCOH",
    Syst.ZEXP_ELFF: "ZExpELFFCCQE",
    Syst.ZEXP_ELFF_AP1: "ZExpELFFAP1CCQE",
    Syst.ZEXP_ELFF_AP2: "ZExpELFFAP2CCQE",
    Syst.ZEXP_ELFF_AP3: "ZExpELFFAP3CCQE",
    Syst.ZEXP_ELFF_AP4: "ZExpELFFAP4CCQE",
    Syst.ZEXP_ELFF_AN1: "ZExpELFFAN1CCQE",
    Syst.ZEXP_ELFF_AN2: "ZExpELFFAN2CCQE",
    Syst.ZEXP_ELFF_AN3: "ZExpELFFAN3CCQE",
    Syst.ZEXP_ELFF_AN4: "ZExpELFFAN4CCQE",
    Syst.ZEXP_ELFF_BP1: "ZExpELFFBP1CCQE",
    Syst.ZEXP_ELFF_BP2: "ZExpELFFBP2CCQE",
    Syst.ZEXP_ELFF_BP3: "ZExpELFFBP3CCQE",
    Syst.ZEXP_ELFF_BP4: "ZExpELFFBP4CCQE",
    Syst.ZEXP_ELFF_BN1: "ZExpELFFBN1CCQE",
    Syst.ZEXP_ELFF_BN2: "ZExpELFFBN2CCQE",
    Syst.ZEXP_ELFF_BN3: "ZExpELFFBN3CCQE",
    Syst.ZEXP_ELFF_BN4: "ZExpELFFBN4CCQE",
}

_BY_NAME: dict[str, Syst] = {name: syst for syst, name in _NAMES.items()}


def as_string(syst: Syst) -> str:
    """Return the dial's name, or "-" for a value that has none."""
    return _NAMES.get(syst, "-")


def from_string(name: str) -> Syst:
    """Return the dial with the given name, or Syst.NULL if none matches."""
    return _BY_NAME.get(name, Syst.NULL)