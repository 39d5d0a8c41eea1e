r"""
Defines the scenario "ub_flux": a short-baseline accelerator flux with a decaying sterile neutrino.

---

A $\nu_\mu$ / $\bar{\nu}_\mu$ flux in the MicroBooNE format is evolved through a constant-density layer (default: 0.47 km of
matter with $\rho = 5\,{\rm g/cm^3}$ and $Y_e = 0.3$). The initial and final fluxes are written to text files, which can be used
to produce oscillograms.

The neutrinos are Majorana, and incoherent interactions, tau regeneration and decay regeneration are all simulated.
The decay scenario is simplified: all mass states except $\nu_4$ are stable and the only decay channel is $\nu_4 \to \nu_3$.
The only non-zero mixing angle between the light states and $\nu_4$ is $\theta_{24}$, and the scalar $\phi$ is massless.
Instead of passing rate matrices, the partial rates are computed by `nuSQUIDSDecay` from the Lagrangian coupling $g_{43}$.
The couplings are scalar by default; set `pscalar` for pseudoscalar couplings (mixtures are not supported).

Only $m_1$ may be zero; the computation does not apply if more than one neutrino mass vanishes.

The scenario knows the following settings:
* `nu4mass`, `theta24`, `coupling` - *sterile mass in eV, mixing angle $\theta_{24}$ in rad, and coupling $g_{43}$*
* `numneu` - *number of neutrino states*
* `emin`, `emax`, `ne` - *energy range in GeV and number of linearly spaced nodes*
* `iinteraction`, `decay_regen`, `pscalar`, `tau_regeneration` - *physics switches*
* `density`, `ye`, `baseline` - *matter density in g/cm^3, electron fraction, and baseline in km*
* `error`, `progress_bar` - *integrator tolerance and progress bar*
* `light_masses` - *$m_1$, $m_2$, $m_3$ in eV*
* `theta12`, `theta13`, `theta23`, `dm21sq`, `dm31sq` - *three-flavor mixing parameters*
* `flux_dir`, `flux_file`, `interpolate_flux` - *location of the input flux and whether it is interpolated to the energy nodes*
* `output_dir`, `initial_name`, `final_base`, `oscillogram` - *output location, file names and whether fluxes are written*
"""
import numpy as np
import os

from nudecay.decay import coupling_matrix
from nudecay.engine import neutrino_type
from nudecay.flux import read_flux, initial_state as flux_state, flux_filename, output_path, write_flux

name : str = "ub_flux"
"""The scenario name."""

NU_MU : int = 1
"""Index of the muon flavor."""

settings : dict = {"nu4mass":1.0, "theta24":1.0, "coupling":1.0,
                   "numneu":4,
                   "emin":2.5e-2, "emax":9.975, "ne":200,
                   "iinteraction":True, "decay_regen":True, "pscalar":False, "tau_regeneration":True,
                   "density":5.0, "ye":0.3, "baseline":0.47,
                   "error":1.0e-15, "progress_bar":True,
                   "light_masses":[0.0, np.sqrt(7.65e-05), np.sqrt(0.0024)],
                   "theta12":0.563942, "theta13":0.154085, "theta23":0.785398,
                   "dm21sq":7.65e-05, "dm31sq":0.00247,
                   "flux_dir":"../fluxes", "flux_file":"MicroBooNE_SQuIDSFormat_Flux_NumuAndAntiNuMu.dat",
                   "interpolate_flux":False,
                   "output_dir":"../output", "initial_name":"ub_initial", "final_base":"ub_final",
                   "oscillogram":True}
"""The scenario settings."""

def interpret_settings():
    global masses, dm41sq, couplings, hstep, hmax, final_name
    m4 = settings["nu4mass"]
    masses = list(settings["light_masses"]) + [m4]
    #assume m_1 is massless
    dm41sq = m4**2
    couplings = coupling_matrix(settings["numneu"], {(3,2):settings["coupling"]})
    #integration step sizes in km
    hstep = settings["baseline"]/2000
    hmax = settings["baseline"]/100
    final_name = flux_filename(settings["final_base"], m4, settings["theta24"], settings["coupling"])
    return

def solver_settings():
    return {"rel_error":settings["error"], "abs_error":settings["error"], "gsl_step":"rkf45",
            "h":hstep, "h_max":hmax, "progress_bar":settings["progress_bar"]}

def energy_nodes(units):
    return np.linspace(settings["emin"]*units.GeV, settings["emax"]*units.GeV, settings["ne"])

def initial_state(sim):
    path = os.path.join(settings["flux_dir"], settings["flux_file"])
    flux = read_flux(path)
    return flux_state(sim.energies(), flux, settings["numneu"], flavor=NU_MU,
                      interpolate=settings["interpolate_flux"])

def build(sim):
    nus = sim.create(energy_nodes(sim.units), settings["numneu"], neutrino_type(sim.nsq, "both"),
                     settings["iinteraction"], settings["decay_regen"], settings["pscalar"], masses, couplings)

    sim.set_switches(tau_regeneration=settings["tau_regeneration"])

    sim.set_body("constant_density", density=settings["density"], ye=settings["ye"], baseline=settings["baseline"])

    sim.set_mixing(angles={(0,1):settings["theta12"], (0,2):settings["theta13"], (1,2):settings["theta23"],
                           (0,3):0.0, (1,3):settings["theta24"], (2,3):0.0},
                   square_mass_differences={1:settings["dm21sq"], 2:settings["dm31sq"], 3:dm41sq},
                   cp_phases={(0,2):0.0, (0,3):0.0, (1,3):0.0})

    sim.log(final_name)

    sim.log("Setting up the initial fluxes for the nuSQuIDSDecay object.")
    sim.set_initial_state(initial_state(sim))
    return nus

def report(sim, stage):
    if stage == "initial":
        fname = settings["initial_name"]
    elif stage == "final":
        fname = final_name
    else:
        raise ValueError(f"Unknown stage '{stage}'")

    #energies are written in eV
    table = sim.flavor_table(flavors=[NU_MU], at_nodes=False, energy_unit=sim.units.eV)
    if settings["oscillogram"]:
        sim.log("Writing Flux")
        write_flux(output_path(settings["output_dir"], fname), table[:,0], [table[:,1], table[:,2]])
        sim.log("Wrote Flux")
    return table
