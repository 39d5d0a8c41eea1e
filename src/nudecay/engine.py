"""
Access to the external evolution engine.

The evolution itself is performed by the python bindings of nuSQuIDS together with the
decay extension `nuSQUIDSDecay`. This module imports these bindings and wraps the few objects
which are needed to configure a run: bodies and tracks, as well as enumerations.
"""
import importlib
import numpy as np
from types import ModuleType
from .units import Units

DEFAULT_MODULE : str = "nuSQuIDS"
"""Name of the nuSQuIDS binding module."""

DECAY_CLASS : str = "nuSQUIDSDecay"
"""Name of the decay-aware nuSQuIDS class."""

BODIES : tuple = ("earth_atm", "constant_density", "vacuum")
"""Bodies known to `make_body`."""


def load_engine(module : str | ModuleType = DEFAULT_MODULE, decay_module : str | ModuleType | None = None) -> tuple:
    """
    Import the nuSQuIDS bindings and locate the decay class.

    Parameters
    ----------
    module : str or ModuleType
        the binding module, or its name
    decay_module : str, ModuleType or None
        the module providing `nuSQUIDSDecay`. If None, it is looked up in `module`.

    Returns
    -------
    nsq : ModuleType
        the binding module
    decay_cls : type
        the class `nuSQUIDSDecay`

    Raises
    ------
    EngineUnavailableError
        if a module cannot be imported or does not provide `nuSQUIDSDecay`.
    """
    nsq = _import(module)

    if decay_module is None:
        source = nsq
    else:
        source = _import(decay_module)

    if not(hasattr(source, DECAY_CLASS)):
        raise EngineUnavailableError(f"The module '{source.__name__}' does not provide '{DECAY_CLASS}'.")
    return nsq, getattr(source, DECAY_CLASS)

def _import(module):
    if isinstance(module, ModuleType):
        return module
    try:
        return importlib.import_module(module)
    except ImportError as e:
        raise EngineUnavailableError(f"Could not import '{module}'. Are the nuSQuIDS python bindings installed?") from e


def make_body(nsq : ModuleType, kind : str, units : Units, zenith : float = np.arccos(-1.),
               density : float = 5.0, ye : float = 0.3, baseline : float = 0.47) -> tuple:
    """
    Create a body and a matching track.

    Parameters
    ----------
    nsq : ModuleType
        the binding module
    kind : str
        'earth_atm', 'constant_density' or 'vacuum'
    units : Units
        used to convert `baseline`
    zenith : float
        zenith angle in rad ('earth_atm' only)
    density : float
        matter density in g/cm^3 ('constant_density' only)
    ye : float
        electron fraction ('constant_density' only)
    baseline : float
        baseline in km ('constant_density' and 'vacuum' only)

    Returns
    -------
    body, track
        the engine objects

    Raises
    ------
    ValueError
        if `kind` is unknown.
    """
    if kind == "earth_atm":
        body = nsq.EarthAtm()
        track = nsq.EarthAtm.Track(zenith)
    elif kind == "constant_density":
        body = nsq.ConstantDensity(density, ye)
        track = nsq.ConstantDensity.Track(baseline*units.km)
    elif kind == "vacuum":
        body = nsq.Vacuum()
        track = nsq.Vacuum.Track(baseline*units.km)
    else:
        raise ValueError(f"Unknown body '{kind}', expected one of {BODIES}.")
    return body, track

def neutrino_type(nsq : ModuleType, name : str):
    """Look up `nsq.NeutrinoType.<name>` ('neutrino', 'antineutrino' or 'both')."""
    return _enum(nsq.NeutrinoType, name, "neutrino type")

def basis(nsq : ModuleType, name : str):
    """Look up `nsq.Basis.<name>` ('flavor' or 'mass')."""
    return _enum(nsq.Basis, name, "basis")

def gsl_step(nsq : ModuleType, name : str):
    """Look up a GSL step function, e.g. 'rkf45' gives `nsq.GSL_STEP_FUNCTIONS.GSL_STEP_RKF45`."""
    return _enum(nsq.GSL_STEP_FUNCTIONS, "GSL_STEP_" + name.upper(), "GSL step function")

def _enum(container, name, what):
    try:
        return getattr(container, name)
    except AttributeError:
        raise ValueError(f"Unknown {what} '{name}'")


class EngineUnavailableError(ImportError):
    """
    Exception indicating that the nuSQuIDS bindings could not be loaded.
    """
    pass
