"""
Command line entry points.

* `nudecay-run-decay` runs the scenario "run_decay" and prints the evolved flavor content.
* `nudecay-ub-flux [nu4mass theta24 coupling]` runs the scenario "ub_flux". If fewer than three parameters are given,
  the defaults of the scenario are used.
"""
import argparse
from .simulation import DecaySimulation

def run_decay(argv : list | None = None) -> int:
    """Entry point of `nudecay-run-decay`."""
    parser = argparse.ArgumentParser(prog="nudecay-run-decay",
                                     description="Evolve atmospheric neutrinos through the Earth with a decaying fourth mass state.")
    parser.parse_args(argv)

    sim = DecaySimulation("run_decay", quiet=True)
    sim.run()
    return 0

def ub_flux(argv : list | None = None) -> int:
    """Entry point of `nudecay-ub-flux`."""
    parser = argparse.ArgumentParser(prog="nudecay-ub-flux",
                                     description="Evolve a MicroBooNE flux with a decaying sterile neutrino and write the fluxes to text files.")
    parser.add_argument("nu4mass", nargs="?", type=float, help="mass of the sterile neutrino in eV")
    parser.add_argument("theta24", nargs="?", type=float, help="mixing angle theta_24 in rad")
    parser.add_argument("coupling", nargs="?", type=float, help="coupling g_43")
    args = parser.parse_args(argv)

    settings = {}
    params = {"nu4mass":args.nu4mass, "theta24":args.theta24, "coupling":args.coupling}
    if None not in params.values():
        for key, item in params.items():
            print(f"{key} = {item:g}")
        settings.update(params)

    sim = DecaySimulation("ub_flux", settings=settings, quiet=False)
    sim.run()
    return 0
