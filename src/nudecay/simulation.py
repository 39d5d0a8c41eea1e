import numpy as np
from types import ModuleType
from .decay import DecayRates
from .engine import load_engine, make_body, basis, gsl_step
from .scenarios import load_scenario
from .units import Units
from ._docs import generate_docs, docs_simulation

SWITCHES : dict = {"incoherent_interactions":"Set_IncoherentInteractions",
                   "majorana":"Set_Majorana",
                   "other_rho_terms":"Set_OtherRhoTerms",
                   "tau_regeneration":"Set_TauRegeneration",
                   "oscillations":"Set_IncludeOscillations"}
"""Physics switches known to `DecaySimulation.set_switches` and the engine methods they toggle."""

class DecaySimulation:
    def __init__(self, scenario : str | ModuleType, engine : tuple | None = None, units : Units | None = None,
                  settings : dict = {}, quiet : bool = False):
        self.quiet : bool = quiet
        """Suppresses progress messages if `True`."""

        self.scenario : ModuleType = load_scenario(scenario, settings, quiet=quiet)
        """The scenario configuring the run."""

        if engine is None:
            engine = load_engine()
        self.nsq, self.decay_cls = engine

        self.units : Units = Units.natural() if units is None else units
        """Unit conversions used for the run."""

        self.settings : dict = {"rel_error":None, "abs_error":None, "gsl_step":None,
                                "h":None, "h_max":None, "progress_bar":None}
        """
        Integration settings passed to the engine (`None` keeps the engine default):
        - rel_error, abs_error: tolerances of the ODE solver
        - gsl_step: name of the GSL step function, e.g. 'rkf45'
        - h, h_max: initial and maximal step size in km
        - progress_bar: show the engine's progress bar
        """
        self.settings.update(self.scenario.solver_settings())

        self.nus = None
        """The `nuSQUIDSDecay` object, created by `create`."""

    def update_settings(self, **new_settings):
        unknown_settings = []

        for setting, value in new_settings.items():
            if setting not in self.settings.keys():
                unknown_settings.append(setting)
            elif value != self.settings[setting]:
                self.log(f"Changing '{setting}' from {self.settings[setting]} to {value}.")
                self.settings[setting] = value

        if len(unknown_settings) > 0:
            print(f"Unknown settings: {unknown_settings}")
        return

    ### configure the engine ###

    def create(self, *args):
        self.nus = self.decay_cls(*args)

        setters = {"rel_error":"Set_rel_error", "abs_error":"Set_abs_error", "progress_bar":"Set_ProgressBar"}
        for key, setter in setters.items():
            if self.settings[key] is not None:
                getattr(self.nus, setter)(self.settings[key])

        if self.settings["gsl_step"] is not None:
            self.nus.Set_GSL_step(gsl_step(self.nsq, self.settings["gsl_step"]))
        if self.settings["h"] is not None:
            self.nus.Set_h(self.settings["h"]*self.units.km)
        if self.settings["h_max"] is not None:
            self.nus.Set_h_max(self.settings["h_max"]*self.units.km)
        return self.nus

    def set_body(self, kind : str, **params):
        body, track = make_body(self.nsq, kind, self.units, **params)
        self.nus.Set_Body(body)
        self.nus.Set_Track(track)
        return

    def set_mixing(self, angles : dict = {}, square_mass_differences : dict = {}, cp_phases : dict = {}):
        for k, dm2 in square_mass_differences.items():
            self.nus.Set_SquareMassDifference(k, dm2)
        for (i, j), theta in angles.items():
            self.nus.Set_MixingAngle(i, j, theta)
        for (i, j), delta in cp_phases.items():
            self.nus.Set_CPPhase(i, j, delta)
        return

    def set_masses(self, masses, m_phi : float | None = None):
        if m_phi is not None:
            self.nus.Set_m_phi(m_phi)
        for i, m in enumerate(masses):
            self.nus.Set_m_nu(m, i)
        return

    def set_switches(self, **switches):
        for key, toggle in switches.items():
            if key not in SWITCHES:
                raise KeyError(f"Unknown physics switch '{key}'")
            getattr(self.nus, SWITCHES[key])(toggle)
        return

    def set_decay_rates(self, rates : DecayRates):
        self.nus.Set_Scalar_Matrices(*rates.scalar)
        self.nus.Set_Pseudoscalar_Matrices(*rates.pseudoscalar)
        return

    def set_initial_state(self, state : np.ndarray):
        self.nus.Set_initial_state(state, basis(self.nsq, "flavor"))
        return

    ### run and evaluate ###

    def evolve(self):
        self.log("Evolving the fluxes.")
        self.nus.EvolveState()
        return

    def energies(self) -> np.ndarray:
        return np.asarray(self.nus.GetERange())/self.units.GeV

    def flavor_table(self, flavors : list | None = None, at_nodes : bool = True, energy_unit : float | None = None) -> np.ndarray:
        if energy_unit is None:
            energy_unit = self.units.GeV
        if flavors is None:
            flavors = range(self.nus.GetNumNeu())

        e_range = np.asarray(self.nus.GetERange())
        rows = []
        for ie, enu in enumerate(e_range):
            row = [enu/energy_unit]
            for rho in (0, 1):
                for flv in flavors:
                    if at_nodes:
                        row.append(self.nus.EvalFlavorAtNode(flv, ie, rho))
                    else:
                        row.append(self.nus.EvalFlavor(flv, enu, rho))
            rows.append(row)
        return np.array(rows)

    def run(self) -> np.ndarray:
        self.log(f"Declaring nuSQuIDSDecay object for scenario '{self.scenario.name}'.")
        self.scenario.build(self)
        self.scenario.report(self, "initial")
        self.evolve()
        table = self.scenario.report(self, "final")
        return table

    def log(self, msg : str):
        if not(self.quiet):
            print(msg)
        return


def format_table(table : np.ndarray) -> str:
    return "\n".join([" ".join([f"{x:g}" for x in row]) for row in table])

generate_docs(docs_simulation.DOCS)
