"""
This module contains pre-defined simulation scenarios.

Currently, the following scenarios are implemented:
1. **'run_decay'**: a four-flavor atmospheric decay run with explicit partial-rate matrices, printed to the terminal.
2. **'ub_flux'**: a MicroBooNE-like flux evolved with a sterile-neutrino coupling $g_{43}$, written to text files.

Load these scenarios using `load_scenario` with their name and settings, or pass them to `nudecay.simulation.DecaySimulation`.

A scenario is a module defining
- `name`: the scenario name
- `settings`: a dictionary of settings
- `interpret_settings()`: called after the settings have been updated
- `solver_settings()`: returns the integration settings of the scenario
- `build(sim)`: returns a configured `nuSQUIDSDecay` object
- `initial_state(sim)`: returns the initial flux
- `report(sim, stage)`: handles output before ('initial') and after ('final') the evolution
"""
import importlib
import importlib.util
import os
from types import ModuleType

REQUIRED : tuple = ("name", "settings", "interpret_settings", "solver_settings", "build", "initial_state", "report")
"""Attributes every scenario module needs to define."""

def load_scenario(scenario : str | ModuleType, user_settings : dict={}, quiet : bool=False) -> ModuleType:
    """
    Import and configure a module defining a simulation scenario.

    Parameters
    ----------
    scenario : str or ModuleType
        The name of a pre-defined scenario, a full dotted import path (e.g., "path.to.module"), or a module.
    user_settings : dict
        A dictionary containing updated settings for the module.
    quiet : bool
        if `True`, updated settings are not printed.

    Returns
    -------
    ModuleType
        The configured module.

    Raises
    ------
    FileNotFoundError
        if the scenario can not be found.
    ScenarioError
        if the module does not define all attributes listed in `REQUIRED`.
    """

    if isinstance(scenario, ModuleType):
        mod = scenario
    else:
        # if scenario is a name, load ./{name}.py as a fresh module
        current_dir = os.path.dirname(os.path.abspath(__file__))
        scenariopath = os.path.join(current_dir, f"{scenario}.py")

        if os.path.exists(scenariopath):
            spec = importlib.util.spec_from_file_location(scenario, scenariopath)
            mod = importlib.util.module_from_spec(spec)
            spec.loader.exec_module(mod)
        else:
            try:
                mod = importlib.import_module(scenario)
            except ImportError as e:
                raise FileNotFoundError(
                    f"No scenario file found at '{scenariopath}' and failed to import '{scenario}'"
                    ) from e

    missing = [attr for attr in REQUIRED if not(hasattr(mod, attr))]
    if len(missing) > 0:
        raise ScenarioError(f"The scenario '{mod.__name__}' does not define {missing}.")

    for key, item in user_settings.items():
        if key in mod.settings:
            mod.settings[key] = item
            if not(quiet):
                print(f"Updating '{key}' to '{item}'.")
        else:
            print(f"Ignoring unknown scenario setting '{key}'.")
    mod.interpret_settings()

    return mod


class ScenarioError(Exception):
    """
    Exception for errors when loading a scenario.
    """
    pass
