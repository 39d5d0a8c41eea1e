import numpy as np
from tabulate import tabulate
from typing import Sequence
from ._docs import generate_docs, docs_decay

STABLE_LIFETIME : float = 1e60
"""Lifetime assigned to channels which are effectively stable."""

CHANNELS : tuple = ("cpp_scalar", "cvp_scalar", "cpp_pseudoscalar", "cvp_pseudoscalar")
"""Names of the four decay process classes, in the order used by `decay_rates`."""


def decay_rate_matrix(lifetimes : np.ndarray, masses : Sequence[float]) -> np.ndarray:
    lifetimes = np.asarray(lifetimes, dtype=float)
    masses = np.asarray(masses, dtype=float)

    if masses.ndim != 1:
        raise InvalidArgumentError("The masses need to be a one-dimensional sequence.")
    numneu = len(masses)
    if lifetimes.shape != (numneu, numneu):
        raise InvalidArgumentError(f"Expected a {numneu}x{numneu} lifetime matrix, got shape {lifetimes.shape}.")
    if not(np.all(masses >= 0)):
        raise InvalidArgumentError("Neutrino masses must be non-negative numbers.")

    upper = lifetimes[np.triu_indices(numneu, k=1)]
    if not(np.all(upper > 0) and np.all(np.isfinite(upper))):
        raise InvalidArgumentError("All lifetimes with row < column must be strictly positive and finite.")

    rates = np.zeros((numneu, numneu))

    for col in range(numneu):
        colrate = 0.
        for row in range(col):
            rate = 1.0/lifetimes[row, col]
            rates[row, col] = rate
            colrate += rate*masses[col]
        rates[col, col] = colrate

    return rates


def lifetime_matrix(numneu : int, channels : dict | None = None, default : float = STABLE_LIFETIME) -> np.ndarray:
    tau = np.full((numneu, numneu), float(default))
    for (row, col), lifetime in (channels or {}).items():
        if not(0 <= row < col < numneu):
            raise InvalidArgumentError(f"Decay channel ({row},{col}) does not satisfy row < col < {numneu}.")
        tau[row, col] = lifetime
    return tau


def coupling_matrix(numneu : int, couplings : dict | None = None) -> np.ndarray:
    g = np.zeros((numneu, numneu))
    for (heavy, light), value in (couplings or {}).items():
        if not(0 <= light < heavy < numneu):
            raise InvalidArgumentError(f"Coupling ({heavy},{light}) does not satisfy light < heavy < {numneu}.")
        g[heavy, light] = value
    return g


class DecayRates:
    def __init__(self, cpp_scalar : np.ndarray, cvp_scalar : np.ndarray,
                 cpp_pseudoscalar : np.ndarray, cvp_pseudoscalar : np.ndarray):
        self.cpp_scalar : np.ndarray = cpp_scalar
        """Chirality-preserving scalar rates."""
        self.cvp_scalar : np.ndarray = cvp_scalar
        """Chirality-violating scalar rates."""
        self.cpp_pseudoscalar : np.ndarray = cpp_pseudoscalar
        """Chirality-preserving pseudoscalar rates."""
        self.cvp_pseudoscalar : np.ndarray = cvp_pseudoscalar
        """Chirality-violating pseudoscalar rates."""

    @property
    def scalar(self) -> tuple:
        """The (cpp, cvp) pair for scalar couplings."""
        return self.cpp_scalar, self.cvp_scalar

    @property
    def pseudoscalar(self) -> tuple:
        """The (cpp, cvp) pair for pseudoscalar couplings."""
        return self.cpp_pseudoscalar, self.cvp_pseudoscalar

    def __getitem__(self, channel : str) -> np.ndarray:
        if channel not in CHANNELS:
            raise KeyError(f"Unknown decay channel '{channel}'")
        return getattr(self, channel)

    def summary(self, floatfmt : str = ".3e") -> str:
        blocks = []
        for channel in CHANNELS:
            mat = self[channel]
            labels = [f"m{i+1}" for i in range(mat.shape[0])]
            table = tabulate(mat, headers=labels, showindex=labels, floatfmt=floatfmt, tablefmt="simple")
            blocks.append(f"{channel}:\n{table}")
        return "\n\n".join(blocks)


def decay_rates(masses : Sequence[float], cpp_scalar : np.ndarray, cvp_scalar : np.ndarray,
                cpp_pseudoscalar : np.ndarray, cvp_pseudoscalar : np.ndarray) -> DecayRates:
    return DecayRates(*[decay_rate_matrix(tau, masses)
                        for tau in (cpp_scalar, cvp_scalar, cpp_pseudoscalar, cvp_pseudoscalar)])


class InvalidArgumentError(ValueError):
    """
    Exception for malformed lifetime, coupling or mass input.
    """
    pass

generate_docs(docs_decay.DOCS)
