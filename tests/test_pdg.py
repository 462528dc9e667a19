import pytest

from nureweight import pdg


@pytest.mark.parametrize("code", [211, -211, 111])
def test_pions(code):
    assert pdg.is_pion(code)
    assert not pdg.is_nucleon(code)


@pytest.mark.parametrize("code", [2212, 2112, 12, 22, 0])
def test_non_pions(code):
    assert not pdg.is_pion(code)


def test_nucleons():
    assert pdg.is_proton(pdg.PROTON)
    assert not pdg.is_proton(pdg.NEUTRON)
    assert pdg.is_neutron(pdg.NEUTRON)
    assert not pdg.is_neutron(pdg.PROTON)
    assert pdg.is_nucleon(pdg.PROTON)
    assert pdg.is_nucleon(pdg.NEUTRON)
    assert not pdg.is_nucleon(-2212)


@pytest.mark.parametrize("code", [12, 14, 16])
def test_neutrinos_and_antineutrinos(code):
    assert pdg.is_neutrino(code)
    assert not pdg.is_anti_neutrino(code)
    assert pdg.is_anti_neutrino(-code)
    assert not pdg.is_neutrino(-code)


def test_charged_leptons_are_not_neutrinos():
    for code in (11, 13, 15, -11):
        assert not pdg.is_neutrino(code)
        assert not pdg.is_anti_neutrino(code)


@pytest.mark.parametrize("a,z", [(12, 6), (16, 8), (40, 18), (208, 82)])
def test_ion_round_trip(a, z):
    code = 1000000000 + z * 10000 + a * 10
    assert pdg.is_ion(code)
    assert pdg.ion_pdg_to_a(code) == a
    assert pdg.ion_pdg_to_z(code) == z


def test_not_ions():
    assert not pdg.is_ion(pdg.PROTON)
    assert not pdg.is_ion(1000000000)
    assert not pdg.is_ion(pdg.CLUSTER_NP)


def test_two_nucleon_clusters():
    for code in (pdg.CLUSTER_NN, pdg.CLUSTER_NP, pdg.CLUSTER_PP):
        assert pdg.is_two_nucleon_cluster(code)
        assert not pdg.is_ion(code)
    assert not pdg.is_two_nucleon_cluster(pdg.PROTON)
    assert not pdg.is_two_nucleon_cluster(2000000203)