"""
This module contains tools to inspect the results of a simulation.

Currently, the following tools are available:
1. Plot the ratio of an evolved and an initial flux using `nudecay.tools.plot`.
"""
from .plot import flux_ratio, plot_flux_ratio
