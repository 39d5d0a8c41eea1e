DOCS = {
    "module":r"""
    This module assembles the decay input handed to `nuSQUIDSDecay`.

    The decay model assumes that a mass state $\nu_j$ can only decay into lighter states $\nu_i$, $i<j$.
    Decays are encoded in a lifetime matrix $\tau_{ij}$ ($i<j$), which is populated with `STABLE_LIFETIME` for every
    closed channel. The lifetimes are turned into rate matrices by `decay_rate_matrix`:
    $$\Gamma_{ij} = \frac{1}{\tau_{ij}}\, , \qquad \Gamma_{jj} = m_j \sum_{i<j} \Gamma_{ij} \, .$$

    Rates are needed for four process classes: chirality-preserving (cpp) and chirality-violating (cvp) decays,
    each for scalar and pseudoscalar couplings. These are collected in a `DecayRates` object using `decay_rates`.

    Alternatively, `nuSQUIDSDecay` can compute the partial rates from a matrix of Lagrangian couplings $g_{ij}$,
    which is created by `coupling_matrix`.
    """,

    "decay_rate_matrix":r"""
    Compute a decay-rate matrix from a lifetime matrix and a mass vector.

    For every column $j$, the off-diagonal entries $\Gamma_{ij} = 1/\tau_{ij}$ with $i<j$ are filled and
    their mass-weighted sum $m_j\sum_{i<j}\Gamma_{ij}$ is stored on the diagonal.
    Entries with $i>j$ are zero. Since $\nu_1$ has no lighter state to decay into, $\Gamma_{11}=0$.

    Closed channels (lifetime `STABLE_LIFETIME`) are not treated separately, they simply yield a negligible rate.

    Parameters
    ----------
    lifetimes : NDArray
        an $N\times N$ lifetime matrix. Only entries with row < column are used.
    masses : sequence of float
        the $N$ neutrino masses in eV, ordered from lightest to heaviest.

    Returns
    -------
    rates : NDArray
        the $N\times N$ decay-rate matrix.

    Raises
    ------
    InvalidArgumentError
        if the shape of `lifetimes` does not match the number of masses,
        if a mass is negative,
        or if a lifetime with row < column is not strictly positive.
    """,

    "lifetime_matrix":"""
    Create an $N\\times N$ lifetime matrix with all channels closed except for `channels`.

    Parameters
    ----------
    numneu : int
        number of neutrino mass states
    channels : dict or None
        maps `(row, col)` to the lifetime for the decay $\\nu_{col} \\to \\nu_{row}$
    default : float
        the lifetime of closed channels

    Returns
    -------
    tau : NDArray
        the lifetime matrix

    Raises
    ------
    InvalidArgumentError
        if a channel does not satisfy `row < col < numneu`.
    """,

    "coupling_matrix":"""
    Create an $N\\times N$ matrix of Lagrangian couplings $g_{ij}$.

    Parameters
    ----------
    numneu : int
        number of neutrino mass states
    couplings : dict or None
        maps `(heavy, light)` to the coupling $g_{\\rm heavy, light}$

    Returns
    -------
    g : NDArray
        the coupling matrix, zero for every unspecified entry.

    Raises
    ------
    InvalidArgumentError
        if an entry does not satisfy `light < heavy < numneu`.
    """,

    "DecayRates":"""
    The four decay-rate matrices used by `nuSQUIDSDecay`.

    The matrices are grouped in pairs as expected by `Set_Scalar_Matrices` and `Set_Pseudoscalar_Matrices`,
    see `scalar` and `pseudoscalar`. Use `summary` for a readable overview.
    """,

    "DecayRates.summary":"""
    Render all four matrices as tables.

    Parameters
    ----------
    floatfmt : str
        format used for the matrix entries

    Returns
    -------
    str
        the formatted tables
    """,

    "decay_rates":"""
    Apply `decay_rate_matrix` to the lifetime matrices of all four process classes.

    Parameters
    ----------
    masses : sequence of float
        neutrino masses in eV
    cpp_scalar, cvp_scalar, cpp_pseudoscalar, cvp_pseudoscalar : NDArray
        lifetime matrices for each process class

    Returns
    -------
    DecayRates
        the corresponding rate matrices
    """
}
