import os
import numpy as np
import pandas as pd
from scipy.interpolate import PchipInterpolator
from typing import Sequence
from ._docs import generate_docs, docs_flux


def read_flux(path : str, ncols : int = 3) -> np.ndarray:
    try:
        input_df = pd.read_table(path, sep=r"\s+", header=None, comment="#")
    except FileNotFoundError:
        raise FileNotFoundError(f"No flux file found under '{path}'")

    table = np.asarray(input_df.values, dtype=float)
    if table.shape[1] < ncols:
        raise ValueError(f"The flux table '{path}' has {table.shape[1]} columns, expected at least {ncols}.")
    return table


def initial_state(e_range : np.ndarray, flux : np.ndarray, numneu : int, flavor : int = 1,
                  columns : tuple = (1, 2), interpolate : bool = False) -> np.ndarray:
    e_range = np.asarray(e_range, dtype=float)
    ne = len(e_range)

    inistate = np.zeros((ne, 2, numneu))

    if not(interpolate):
        if flux.shape[0] < ne:
            raise ValueError(f"The flux table has {flux.shape[0]} rows, but {ne} energy nodes are needed.")
        weights = [flux[:ne, col] for col in columns]
    else:
        logE = np.log10(flux[:,0])
        weights = [PchipInterpolator(logE, flux[:,col], extrapolate=False)(np.log10(e_range)) for col in columns]
        weights = [np.nan_to_num(w) for w in weights]

    for rho, w in enumerate(weights):
        inistate[:, rho, flavor] = w
    return inistate


def pure_flavor_state(ne : int, numneu : int, flavor : int = 1) -> np.ndarray:
    inistate = np.zeros((ne, 2, numneu))
    inistate[:, :, flavor] = 1.
    return inistate


def flux_filename(base : str, mass : float, theta : float, coupling : float) -> str:
    return f"{base}_m{mass:.3f}_t{theta:.3f}_c{coupling:.3f}"


def output_path(outdir : str, name : str) -> str:
    return os.path.join(outdir, name + ".dat")


def write_flux(path : str, energies : Sequence[float], columns : Sequence[Sequence[float]]):
    dic = {"E":np.asarray(energies, dtype=float)}
    for i, col in enumerate(columns):
        dic[f"col{i}"] = np.asarray(col, dtype=float)

    dir_name = os.path.dirname(path)
    if dir_name:
        os.makedirs(dir_name, exist_ok=True)

    output_df = pd.DataFrame(dic)
    output_df.to_csv(path, sep=" ", header=False, index=False, float_format="%g")
    return

generate_docs(docs_flux.DOCS)
