r"""
Unit conversions for the natural units used by nuSQuIDS.

nuSQuIDS works in units where $\hbar = c = 1$ and energies are measured in eV.
Lengths and times are thus given in ${\rm eV}^{-1}$. The conversion factors are computed with `natpy`.
"""
import natpy as nat
from dataclasses import dataclass

nat.set_active_units("HEP")

@dataclass(frozen=True)
class Units:
    """
    Conversion factors to the natural units of the evolution engine.

    Multiply a value by a factor to convert it to engine units, e.g., `5*units.km`.
    Divide by a factor to convert back, e.g., `E/units.GeV`.
    """
    eV : float = 1.
    """Electronvolt (reference energy)."""
    GeV : float = 1e9
    """Gigaelectronvolt in eV."""
    meter : float = 5.0677307e6
    """Meter in 1/eV."""
    km : float = 5.0677307e9
    """Kilometer in 1/eV."""
    cm : float = 5.0677307e4
    """Centimeter in 1/eV."""
    sec : float = 1.5192674e15
    """Second in 1/eV."""

    @classmethod
    def natural(cls) -> 'Units':
        """
        Compute the conversion factors using `natpy`.

        Returns
        -------
        Units
            the conversion factors
        """
        meter = float(nat.convert(nat.m, nat.eV**(-1)))
        return cls(eV = 1.,
                   GeV = float(nat.convert(nat.GeV, nat.eV)),
                   meter = meter,
                   km = float(nat.convert(nat.km, nat.eV**(-1))),
                   cm = 1e-2*meter,
                   sec = float(nat.convert(nat.s, nat.eV**(-1))))
