"""
Plot evolved fluxes written by `nudecay.flux.write_flux`.
"""
import numpy as np
import matplotlib.pyplot as plt
from typing import Tuple
from nudecay.flux import read_flux

def flux_ratio(initial_path : str, final_path : str) -> Tuple[np.ndarray, np.ndarray]:
    """
    Compute the ratio of a final and an initial flux file.

    Both files need to share the same energy column.
    Energies with a vanishing initial flux are assigned a ratio of 0.

    Parameters
    ----------
    initial_path, final_path : str
        paths to the flux files

    Returns
    -------
    E : NDArray
        energies as written in the files
    ratio : NDArray
        array of shape `(len(E), ncols-1)` with the ratio for each flux column

    Raises
    ------
    ValueError
        if the energy columns of the two files differ.
    """
    initial = read_flux(initial_path, ncols=2)
    final = read_flux(final_path, ncols=2)

    if initial.shape != final.shape or not(np.allclose(initial[:,0], final[:,0])):
        raise ValueError("The initial and final flux need to be tabulated at the same energies.")

    num = final[:,1:]
    den = initial[:,1:]
    ratio = np.divide(num, den, out=np.zeros_like(num), where=(den!=0))
    return initial[:,0], ratio

def plot_flux_ratio(initial_path : str, final_path : str, ax=None, labels : Tuple[str, ...] = (r"$\nu_\mu$", r"$\bar{\nu}_\mu$"),
                    energy_scale : float = 1e-9):
    """
    Plot the ratio of a final and an initial flux as a function of energy.

    Parameters
    ----------
    initial_path, final_path : str
        paths to the flux files
    ax : Axes or None
        the axes to draw on. If None, a new figure is created.
    labels : tuple of str
        labels for the flux columns
    energy_scale : float
        factor converting the energy column for the x-axis (default: eV to GeV)

    Returns
    -------
    ax : Axes
        the axes containing the plot
    """
    E, ratio = flux_ratio(initial_path, final_path)

    if ax is None:
        _, ax = plt.subplots(figsize=(7,5))

    for i in range(ratio.shape[1]):
        label = labels[i] if i < len(labels) else None
        ax.plot(E*energy_scale, ratio[:,i], label=label)

    ax.set_xlabel("Energy E (GeV)")
    ax.set_ylabel("Final / initial flux")
    ax.legend()
    return ax
