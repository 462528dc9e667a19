import pytest

from nureweight.syst import Syst, as_string, from_string


@pytest.mark.parametrize(
    "syst, name",
    [
        (Syst.MA_NCEL, "MaNCEL"),
        (Syst.RVP_CC1PI, "NonRESBGvpCC1pi"),
        (Syst.BR1_GAMMA, "RDecBR1gamma"),
        (Syst.NORM_CCCOHPI, "NormCCCOH"),
        (Syst.THETA_DELTA2NRAD, "ThetaDelta2NRad"),
        (Syst.ZEXP_ELFF, "ZExpELFFCCQE"),
        (Syst.FR_CEX_PI, "FrCEx_pi"),
    ],
)
def test_as_string_known(syst, name):
    assert as_string(syst) == name


@pytest.mark.parametrize(
    "syst",
    [
        Syst.NULL,
        Syst.INVALID_FR_ELAS_PI,
        Syst.INVALID_FR_ELAS_N,
        Syst.N_TWK_DIALS,
        Syst.PROF_REW,
    ],
)
def test_as_string_unnamed_is_dash(syst):
    assert as_string(syst) == "-"


def test_from_string_unknown_is_null():
    assert from_string("NoSuchDial") is Syst.NULL
    assert from_string("") is Syst.NULL
    assert from_string("-") is Syst.NULL


def test_from_string_known():
    assert from_string("MaCCQE") is Syst.MA_CCQE
    assert from_string("FracPN_CCMEC") is Syst.FRACPN_CCMEC


def test_round_trip_for_all_named_dials():
    for syst in Syst:
        name = as_string(syst)
        if name != "-":
            assert from_string(name) is syst


def test_names_are_unique():
    names = [as_string(s) for s in Syst if as_string(s) != "-"]
    assert len(names) == len(set(names))


def test_null_is_zero_and_end_marker_is_past_all_dials():
    assert from_string("NoSuchDial") == 0
    named = [from_string(as_string(s)) for s in Syst if as_string(s) != "-"]
    assert all(0 < s < Syst.N_TWK_DIALS for s in named)
    assert Syst.PROF_REW == Syst.N_TWK_DIALS + 1


def test_every_dial_below_end_marker_is_named_except_invalid():
    unnamed = {
        s
        for s in Syst
        if 0 < s < Syst.N_TWK_DIALS and as_string(s) == "-"
    }
    assert unnamed == {Syst.INVALID_FR_ELAS_PI, Syst.INVALID_FR_ELAS_N}


def test_values_are_contiguous():
    named = sorted(
        int(from_string(as_string(s))) for s in Syst if as_string(s) != "-"
    )
    unnamed = [int(s) for s in Syst if as_string(s) == "-"]
    values = sorted(named + unnamed)
    assert values == list(range(len(values)))


def test_enum_order_follows_declaration():
    assert from_string("MaCCQEshape") < from_string("MaCCQE")
    assert from_string("FrCEx_pi") < Syst.INVALID_FR_ELAS_PI < from_string("FrInel_pi")
    assert from_string("E0CCQEshape") < from_string("E0CCQE")