DOCS = {
    "module":"""
    This module defines the `DecaySimulation` class which runs a scenario with `nuSQUIDSDecay`.

    The class connects three ingredients:
    - a scenario from `nudecay.scenarios`, which decides how the engine is configured and what is written out,
    - the nuSQuIDS bindings loaded by `nudecay.engine.load_engine`,
    - a `nudecay.units.Units` object used for all unit conversions.

    The scenario uses the `set_...` methods of `DecaySimulation` to configure the engine in the order it requires.
    """,

    "DecaySimulation":"""
    Configure, evolve and evaluate a `nuSQUIDSDecay` object according to a scenario.

    A typical run consists of the following steps, all carried out by `run`:
    1. The scenario creates the engine object via `create` and configures it using `set_body`, `set_mixing`, `set_masses`,
     `set_switches`, `set_decay_rates` and `set_initial_state`.
    2. The scenario reports on the initial state (e.g., writes the initial flux to a file).
    3. The flux is evolved using `evolve`.
    4. The scenario reports on the final state, typically using `flavor_table`.

    Parameters
    ----------
    scenario : str or ModuleType
        passed to `nudecay.scenarios.load_scenario`
    engine : tuple or None
        the binding module and decay class as returned by `nudecay.engine.load_engine`. If None, the default bindings are loaded.
    units : Units or None
        unit conversions. If None, `Units.natural()` is used.
    settings : dict
        updated settings for the scenario
    quiet : bool
        if `True`, progress messages are suppressed.

    Raises
    ------
    EngineUnavailableError
        if `engine` is None and the nuSQuIDS bindings can not be loaded.
    """,

    "DecaySimulation.update_settings":"""
    Update the integration `settings` of the class.

    Changed values are reported, unknown settings are listed and ignored.
    The settings take effect the next time `create` is called.
    """,

    "DecaySimulation.create":"""
    Create the `nuSQUIDSDecay` object and apply the integration `settings`.

    Parameters
    ----------
    args
        passed to the constructor of `nuSQUIDSDecay`

    Returns
    -------
    nus
        the new engine object, also stored as `nus`
    """,

    "DecaySimulation.set_body":"""
    Set the body and track of the engine, see `nudecay.engine.make_body` for `kind` and `params`.
    """,

    "DecaySimulation.set_mixing":"""
    Set square mass differences, mixing angles and CP phases.

    Parameters
    ----------
    angles : dict
        maps `(i, j)` to the mixing angle $\\theta_{ij}$ (0-indexed, in rad)
    square_mass_differences : dict
        maps `k` to $\\Delta m^2_{k1}$ in eV$^2$
    cp_phases : dict
        maps `(i, j)` to the CP phase $\\delta_{ij}$ (in rad)
    """,

    "DecaySimulation.set_masses":"""
    Pass the neutrino masses (in eV) and, if given, the mass of the scalar $\\phi$ to the engine.
    """,

    "DecaySimulation.set_switches":"""
    Toggle physics effects of the engine.

    Accepted keywords are listed in `SWITCHES`, e.g., `set_switches(majorana=True, other_rho_terms=False)`.

    Raises
    ------
    KeyError
        if a switch is unknown.
    """,

    "DecaySimulation.set_decay_rates":"""
    Pass the scalar and pseudoscalar rate matrices of a `nudecay.decay.DecayRates` object to the engine.
    """,

    "DecaySimulation.set_initial_state":"""
    Set the initial state of the engine in the flavor basis.

    Parameters
    ----------
    state : NDArray
        array of shape `(nE, 2, numneu)`
    """,

    "DecaySimulation.energies":"""
    Return the energy nodes of the engine in GeV.
    """,

    "DecaySimulation.flavor_table":"""
    Evaluate the flavor content at each energy node.

    Each row of the table contains the energy in GeV, followed by the flavor content for neutrinos and then for antineutrinos.

    Parameters
    ----------
    flavors : list of int or None
        the flavors to evaluate. If None, all flavors are evaluated.
    at_nodes : bool
        if `True` use `EvalFlavorAtNode`, otherwise use `EvalFlavor` at the node energies.
    energy_unit : float or None
        the unit of the energy column, e.g. `units.eV`. If None, energies are given in GeV.

    Returns
    -------
    table : NDArray
        array of shape `(nE, 1 + 2*len(flavors))`
    """,

    "DecaySimulation.run":"""
    Build the engine object, evolve the initial flux and report the results as defined by the scenario.

    Returns
    -------
    table : NDArray
        the table returned by the scenario's final report
    """,

    "DecaySimulation.log":"""
    Print a progress message unless the simulation is `quiet`.
    """,

    "format_table":"""
    Format a table as space-separated lines, using six significant digits.
    """
}
