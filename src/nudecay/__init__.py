r"""
# nudecay

This python package drives neutrino-flavor evolution with decaying neutrinos.

The evolution is carried out by [nuSQuIDS](https://github.com/arguelles/nuSQuIDS) and its decay extension `nuSQUIDSDecay`,
which need to be installed with their python bindings. The package takes care of everything around the evolution:
- building the decay-rate matrices of a simplified sterile-neutrino decay model,
- configuring masses, mixing and the body through which neutrinos propagate,
- reading an input flux and writing the evolved flavor content to text files.

---

# Decay-rate matrices

In the decay model, a mass state $\nu_j$ decays only into lighter states $\nu_i$, $i<j$.
Each open channel has a lifetime $\tau_{ij}$, closed channels are assigned `nudecay.decay.STABLE_LIFETIME`.
The rate matrix handed to `nuSQUIDSDecay` is
$$\Gamma_{ij} = \frac{1}{\tau_{ij}} \quad (i<j) \, , \qquad \Gamma_{jj} = m_j \sum_{i<j}\Gamma_{ij} \, .$$

```python
from nudecay.decay import lifetime_matrix, decay_rate_matrix

masses = [0.0, 0.00875, 0.04899, 1.0]
tau = lifetime_matrix(4, {(0,3):100., (1,3):100., (2,3):100.})
rates = decay_rate_matrix(tau, masses)
```

Rates are needed for chirality-preserving and chirality-violating decays, each for scalar and pseudoscalar couplings.
Use `nudecay.decay.decay_rates` to compute all four at once.

# Running a scenario

Complete runs are defined by scenarios, see `nudecay.scenarios`. A scenario is executed by a `DecaySimulation`:

```python
from nudecay import DecaySimulation

sim = DecaySimulation("ub_flux", settings={"nu4mass":2.0, "theta24":0.3, "coupling":1.5})
table = sim.run()
```
The same runs are available from the command line as `nudecay-run-decay` and `nudecay-ub-flux`.

> **A note on units**:
> nuSQuIDS works in natural units with energies in eV. Conversion factors are collected in a `nudecay.units.Units` object,
> which is passed explicitly wherever units are converted.
"""
from .decay import decay_rate_matrix, decay_rates, lifetime_matrix, coupling_matrix, DecayRates, InvalidArgumentError, STABLE_LIFETIME
from .units import Units
from .simulation import DecaySimulation
from .scenarios import load_scenario

__version__ = "0.1.0"
