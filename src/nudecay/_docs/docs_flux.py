DOCS = {
    "module":"""
    This module handles neutrino fluxes stored as plain text.

    Input fluxes are whitespace-delimited tables with one row per energy. The first column contains the energy in GeV,
    the following columns contain the neutrino and antineutrino weights. Such a table is read with `read_flux`
    and translated into the initial state of a `nuSQUIDSDecay` object using `initial_state`.

    Evolved fluxes are written with `write_flux` to a file whose name is constructed by `flux_filename` and `output_path`.
    """,

    "read_flux":"""
    Read a flux table from a text file.

    Parameters
    ----------
    path : str
        path to the flux file
    ncols : int
        the minimal number of columns expected in the file

    Returns
    -------
    table : NDArray
        the flux table, one row per energy

    Raises
    ------
    FileNotFoundError
        if no file is found at `path`.
    ValueError
        if the table has less than `ncols` columns.
    """,

    "initial_state":"""
    Create an initial state for nuSQuIDS from a flux table.

    The state has the shape `(len(e_range), 2, numneu)` and is indexed by energy node, neutrino (0) / antineutrino (1), and flavor.
    All weights are placed in a single flavor; every other entry is zero.

    By default, row `i` of the table is assigned to the energy node `i`. If `interpolate` is `True`, the weights are instead
    interpolated in $\\log_{10} E$ using `scipy.interpolate.PchipInterpolator`, with zero flux outside of the tabulated range.

    Parameters
    ----------
    e_range : NDArray
        energy nodes in GeV
    flux : NDArray
        the flux table returned by `read_flux`
    numneu : int
        number of neutrino states
    flavor : int
        index of the flavor carrying the flux (default: 1, muon flavor)
    columns : tuple of int
        columns holding the neutrino and the antineutrino weights
    interpolate : bool
        interpolate the table to `e_range`

    Returns
    -------
    inistate : NDArray
        the initial state

    Raises
    ------
    ValueError
        if `interpolate` is `False` and the table has fewer rows than energy nodes.
    """,

    "pure_flavor_state":"""
    Create an initial state with unit flux in a single flavor at every energy node for both neutrinos and antineutrinos.
    """,

    "flux_filename":"""
    Construct the name of an output file from the sterile mass, the mixing angle and the coupling.

    Each parameter is written in fixed-point notation with three decimals, e.g.,
    `flux_filename("ub_final", 1, 0.5, 2)` returns `'ub_final_m1.000_t0.500_c2.000'`.
    """,

    "output_path":"""
    Join an output directory and a file name, appending the extension '.dat'.
    """,

    "write_flux":"""
    Write a flux to a text file.

    Each line contains the energy followed by the values of all `columns` at that energy, separated by spaces.
    Values are written with six significant digits (`%g`). The file has no header. Missing directories are created.

    Parameters
    ----------
    path : str
        the output file
    energies : sequence of float
        the energies, in the unit chosen by the caller
    columns : sequence of sequences
        the columns written after the energy, each with the same length as `energies`.
    """
}
