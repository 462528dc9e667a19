import pytest

from nureweight.syst import Syst, as_string
from nureweight.uncertainty import SystUncertainty, UncertaintyEntry, UncertaintyTable


@pytest.fixture(autouse=True)
def _fresh_singleton():
    SystUncertainty.reset_instance()
    yield
    SystUncertainty.reset_instance()


def test_table_reads_plus_and_minus():
    table = UncertaintyTable(
        {"MaCCQE@PlusOneSigma": 0.25, "MaCCQE@MinusOneSigma": 0.15}
    )
    entry = table.errors()[Syst.MA_CCQE]
    assert entry == UncertaintyEntry(0.25, 0.15)


def test_table_missing_params_are_zero():
    table = UncertaintyTable({})
    assert table.errors()[Syst.NORM_CCMEC] == UncertaintyEntry(0.0, 0.0)


def test_table_skips_null_and_deprecated_dials():
    errors = UncertaintyTable().errors()
    assert Syst.NULL not in errors
    assert Syst.INVALID_FR_ELAS_PI not in errors
    assert Syst.INVALID_FR_ELAS_N not in errors
    assert Syst.N_TWK_DIALS not in errors
    assert Syst.PROF_REW not in errors


def test_table_covers_every_named_dial():
    errors = UncertaintyTable().errors()
    named = {s for s in Syst if as_string(s) != "-"}
    assert set(errors) == named


def test_configure_updates_values():
    table = UncertaintyTable()
    table.configure({"MFP_pi@PlusOneSigma": 0.2})
    assert table.errors()[Syst.MFP_PI].plus_one_sigma == 0.2
    assert table.errors()[Syst.MFP_PI].minus_one_sigma == 0.0


def test_one_sigma_err_by_sign():
    plus, minus = 0.3, 0.1
    table = UncertaintyTable({"NormCCQE@PlusOneSigma": plus, "NormCCQE@MinusOneSigma": minus})
    unc = SystUncertainty(table)
    assert unc.one_sigma_err(Syst.NORM_CCQE, 1) == plus
    assert unc.one_sigma_err(Syst.NORM_CCQE, -1) == minus
    assert unc.one_sigma_err(Syst.NORM_CCQE) == pytest.approx(0.5 * (plus + minus))


def test_one_sigma_err_unknown_dial_is_zero():
    unc = SystUncertainty(UncertaintyTable())
    assert unc.one_sigma_err(Syst.PROF_REW, 1) == 0.0
    assert unc.one_sigma_err(Syst.INVALID_FR_ELAS_N) == 0.0


def test_set_uncertainty_round_trip():
    unc = SystUncertainty(UncertaintyTable())
    unc.set_uncertainty(Syst.FORM_ZONE, 0.4, 0.2)
    assert unc.one_sigma_err(Syst.FORM_ZONE, 1) == 0.4
    assert unc.one_sigma_err(Syst.FORM_ZONE, -1) == 0.2


def test_set_uncertainty_writes_into_table():
    table = UncertaintyTable()
    unc = SystUncertainty(table)
    unc.set_uncertainty(Syst.MA_NCEL, 0.5, 0.5)
    assert table.errors()[Syst.MA_NCEL] == UncertaintyEntry(0.5, 0.5)


def test_instance_is_shared():
    SystUncertainty.instance().set_uncertainty(Syst.MA_CCQE, 0.7, 0.3)
    shared = SystUncertainty.instance()
    assert shared.one_sigma_err(Syst.MA_CCQE, 1) == 0.7
    assert shared.one_sigma_err(Syst.MA_CCQE, -1) == 0.3


def test_reset_instance_creates_new():
    first = SystUncertainty.instance()
    first.set_uncertainty(Syst.MA_CCRES, 0.2, 0.2)
    SystUncertainty.reset_instance()
    second = SystUncertainty.instance()
    assert second is not first
    assert second.one_sigma_err(Syst.MA_CCRES, 1) == 0.0