r"""
Defines the scenario "run_decay": atmospheric neutrinos crossing the Earth with a decaying fourth mass state.

---

The scenario evolves a pure $\nu_\mu$ / $\bar{\nu}_\mu$ flux through the Earth along the diameter (zenith angle $\pi$)
for four neutrino mass states. The three light masses are fixed by the default mass splittings,
$m_1 = 0$, $m_2 = \sqrt{\Delta m^2_{21}}$, $m_3 = \sqrt{\Delta m^2_{31}}$, and $m_4$ is taken from the settings.

Decays are specified by explicit lifetime matrices for all four process classes
(chirality preserving / violating, scalar / pseudoscalar). By default, $\nu_4$ decays into each of the lighter
states with a lifetime of $\tau = 100$ (in engine units), while all other channels are closed.
The neutrinos are Majorana, incoherent interactions are switched off and decay regeneration ("other rho terms") is active.

After the evolution, the flavor content for all four flavors of neutrinos and antineutrinos is printed for each energy node.

The scenario knows the following settings:
* `numneu` - *number of neutrino states*
* `emin`, `emax`, `ne` - *energy range in GeV and number of logarithmically spaced nodes*
* `tolerance` - *relative and absolute error of the integrator*
* `zenith` - *zenith angle of the track in rad*
* `m4`, `m_phi` - *mass of $\nu_4$ and of the scalar $\phi$ in eV*
* `theta_sterile` - *mixing angle $\theta_{14} = \theta_{24} = \theta_{34}$*
* `cpp_scalar_lifetime`, `cvp_scalar_lifetime`, `cpp_pseudoscalar_lifetime`, `cvp_pseudoscalar_lifetime` - *lifetimes of the open channels*
* `channels` - *open decay channels `(row, col)`, i.e., $\nu_{\rm col} \to \nu_{\rm row}$*
* `initial_flavor` - *flavor of the initial flux*
* `incoherent_interactions`, `majorana`, `other_rho_terms` - *physics switches*
* `show_rates` - *print the decay-rate matrices*
"""
import numpy as np

from nudecay.decay import CHANNELS, lifetime_matrix, decay_rates
from nudecay.flux import pure_flavor_state
from nudecay.simulation import format_table

name : str = "run_decay"
"""The scenario name."""

settings : dict = {"numneu":4,
                   "emin":1e2, "emax":1e3, "ne":10,
                   "tolerance":1e-16,
                   "zenith":np.arccos(-1.),
                   "m4":1.0, "m_phi":0.0,
                   "theta_sterile":0.785398,
                   "cpp_scalar_lifetime":1e2, "cvp_scalar_lifetime":1e2,
                   "cpp_pseudoscalar_lifetime":1e2, "cvp_pseudoscalar_lifetime":1e2,
                   "channels":[(0,3), (1,3), (2,3)],
                   "initial_flavor":1,
                   "incoherent_interactions":False, "majorana":True, "other_rho_terms":True,
                   "show_rates":False}
"""The scenario settings."""

lifetimes : dict = {}
"""Lifetime matrices for each process class, derived from `settings`."""

def interpret_settings():
    global lifetimes
    numneu = settings["numneu"]
    lifetimes = {ch : lifetime_matrix(numneu, {c:settings[f"{ch}_lifetime"] for c in settings["channels"]})
                    for ch in CHANNELS}
    return

def solver_settings():
    return {"rel_error":settings["tolerance"], "abs_error":settings["tolerance"]}

def energy_nodes(units):
    emin = settings["emin"]*units.GeV
    emax = settings["emax"]*units.GeV
    return np.logspace(np.log10(emin), np.log10(emax), settings["ne"])

def initial_state(sim):
    return pure_flavor_state(len(sim.nus.GetERange()), settings["numneu"], settings["initial_flavor"])

def build(sim):
    numneu = settings["numneu"]
    nus = sim.create(energy_nodes(sim.units), numneu)

    sim.set_body("earth_atm", zenith=settings["zenith"])

    #light masses follow from the default splittings, m1 is massless
    m1 = 0.0
    m2 = np.sqrt(nus.Get_SquareMassDifference(1))
    m3 = np.sqrt(nus.Get_SquareMassDifference(2))
    m4 = settings["m4"]
    masses = [m1, m2, m3, m4]

    sim.set_mixing(square_mass_differences={3:m4**2 - m1**2})
    nus.Set_MixingParametersToDefault()

    theta = settings["theta_sterile"]
    sim.set_mixing(angles={(0,3):theta, (1,3):theta, (2,3):theta})

    sim.set_masses(masses, m_phi=settings["m_phi"])

    sim.set_initial_state(initial_state(sim))

    sim.set_switches(incoherent_interactions=settings["incoherent_interactions"],
                     majorana=settings["majorana"],
                     other_rho_terms=settings["other_rho_terms"])

    rates = decay_rates(masses, *[lifetimes[ch] for ch in CHANNELS])
    if settings["show_rates"]:
        print(rates.summary())
    sim.set_decay_rates(rates)

    nus.Compute_DT()
    return nus

def report(sim, stage):
    if stage == "final":
        table = sim.flavor_table(at_nodes=True)
        print(format_table(table))
        return table
    return None
