# nureweight

Building blocks for reweighting simulated neutrino interaction events when
the physics parameters behind them are varied. The package supplies the
systematic "tweak dials", their one-sigma uncertainties, a driver that
combines weight calculators, and per-event records of tweak/weight results.

## Modules

- `nureweight.syst`: the `Syst` integer enumeration of tweak dials (from
  `Syst.NULL` up to the `Syst.N_TWK_DIALS` end marker, then `Syst.PROF_REW`),
  and the `InteractionType` and `HadronFate` enumerations. `as_string(syst)`
  gives a dial's name (`"-"` for a value without one, such as the invalid
  elastic-fate dials) and `from_string(name)` gives the dial back
  (`Syst.NULL` if no name matches).
- `nureweight.classify`: predicates that group dials
  (`is_inuke_pion_fate`, `is_inuke_nucleon_fate`, `is_inuke_fate`,
  `is_inuke_pion_mean_free_path`, `is_inuke_nucleon_mean_free_path`,
  `is_inuke_mean_free_path`), the fate dials by position (`next_pion_fate(i)`,
  `next_nucleon_fate(i)`, `Syst.NULL` past the fourth), and lookups
  `inuke_fate_to_syst(fate, pdgc)` and
  `non_resonant_background(itype, probe, hitnuc, npi)`, which return
  `Syst.NULL` when nothing matches.
- `nureweight.pdg`: particle-code constants and predicates: `is_pion`,
  `is_proton`, `is_neutron`, `is_nucleon`, `is_neutrino`, `is_anti_neutrino`,
  `is_ion`, `ion_pdg_to_a`, `ion_pdg_to_z`, `is_two_nucleon_cluster`.
- `nureweight.utils`: `mean_free_path_weight(prob_def, prob_twk, interacted)`,
  `agky_weight(pdgc, xf, pt2)` (always 1.0), `sign(twkdial)` (-1, 0 or +1)
  and `particle_a(pdg)` (1 for nucleons, A for ions, otherwise 0).
- `nureweight.systset`: `SystSet`, the enabled dials and their values, each
  held in a `SystInfo` (`current`, `init`, `minimum`, `maximum`, `step`).
  It supports `add`, `remove`, `set`, `len()`, `in`, `included()` (dial
  order), `info`, `describe()` and `copy()`. `set` on a dial not yet added
  adds it with the defaults (range -1 to +1, step 0.05); `Syst.NULL` is
  never added.
- `nureweight.uncertainty`: `UncertaintyTable`, built from a mapping of
  parameters named `"<dial name>@PlusOneSigma"` and
  `"<dial name>@MinusOneSigma"` (missing entries count as zero), and
  `SystUncertainty`, which answers `one_sigma_err(syst, sign=0)` with the
  plus error (`sign > 0`), the minus error (`sign < 0`) or their mean, and 0
  for an unknown dial. `SystUncertainty.instance()` returns a shared
  instance built with all-zero errors; `reset_instance()` drops it.
  `set_uncertainty(syst, plus_err, minus_err)` replaces a dial's errors.
- `nureweight.reweight`: the abstract `WeightCalculator` interface and the
  `ReWeight` driver.
- `nureweight.iorecord`: `BranchDesc` (parameter name, mean and one-sigma
  errors), `WeightInfo` (a tweak value and its weight) and `IORecord`, the
  results of one event. `IORecord.tweak(i)` and `IORecord.weight(i)` return
  0 and 1 for an index with no result.

## Example

```python
from nureweight.syst import Syst, as_string, from_string
from nureweight.systset import SystSet
from nureweight.uncertainty import SystUncertainty, UncertaintyTable
from nureweight.utils import mean_free_path_weight

dials = SystSet()
dials.set(Syst.MFP_PI, 1.0)
print([as_string(s) for s in dials.included()])   # ['MFP_pi']
assert from_string("MaCCQE") is Syst.MA_CCQE

errors = SystUncertainty(UncertaintyTable({
    "MFP_pi@PlusOneSigma": 0.2,
    "MFP_pi@MinusOneSigma": 0.1,
}))
print(errors.one_sigma_err(Syst.MFP_PI, +1))      # 0.2

# weight for a hadron that escaped, given nominal and tweaked survival odds
w = mean_free_path_weight(0.8, 0.6, interacted=False)  # 0.75
```

## Reweighting with calculators

Subclass `WeightCalculator` and implement all its methods. Register
instances with `ReWeight.adopt(name, calculator)`; adopting a second
calculator under a name already in use keeps the first.
`calculator_names()` lists names in the order they were first added.

Set dial values in `ReWeight.systematics()`, then call `reconfigure()`: each
calculator receives every enabled dial through `set_systematic` and then
has its own `reconfigure` called. `calc_weight(event)` returns the product
of all calculators' weights; calculators are visited in order of name.
`describe()` returns (and logs) the current dial values.

## What the package does not do

The package contains no concrete weight calculators for any cross-section,
hadronization or rescattering model, and no event record type: `ReWeight`
passes the event object through to the calculators you supply. There is no
file input or output; `IORecord` and `BranchDesc` are plain in-memory
objects. There is no command-line tool.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```