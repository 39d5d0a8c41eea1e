import types
import numpy as np
import pytest


class FakeDecay:
    """Records the calls made to a nuSQUIDSDecay object."""
    def __init__(self, e_nodes, numneu, *args):
        self.e_nodes = np.asarray(e_nodes, dtype=float)
        self.numneu = numneu
        self.args = args
        self.calls = []
        self.dm2 = {1:7.65e-05, 2:2.47e-03, 3:0.}
        self.state = None
        self.factor = 1.

    def __getattr__(self, name):
        if name.startswith("Set_") or name == "Compute_DT":
            def record(*args):
                self.calls.append((name, args))
            return record
        raise AttributeError(name)

    def called(self, name):
        return [args for call, args in self.calls if call == name]

    def Get_SquareMassDifference(self, k):
        return self.dm2[k]

    def Set_SquareMassDifference(self, k, dm2):
        self.calls.append(("Set_SquareMassDifference", (k, dm2)))
        self.dm2[k] = dm2

    def Set_initial_state(self, state, basis):
        self.calls.append(("Set_initial_state", (state, basis)))
        self.state = np.array(state)

    def EvolveState(self):
        self.calls.append(("EvolveState", ()))
        self.factor = 0.5

    def GetERange(self):
        return self.e_nodes

    def GetNumNeu(self):
        return self.numneu

    def EvalFlavorAtNode(self, flv, ie, rho):
        return self.state[ie, rho, flv]*self.factor

    def EvalFlavor(self, flv, enu, rho):
        ie = int(np.argmin(abs(self.e_nodes - enu)))
        return self.EvalFlavorAtNode(flv, ie, rho)


class _Body:
    def __init__(self, *args):
        self.args = args

class _Track:
    def __init__(self, x):
        self.x = x


def make_fake_nsq(with_decay=True):
    nsq = types.ModuleType("fake_nsq")
    for body in ["EarthAtm", "ConstantDensity", "Vacuum"]:
        cls = type(body, (_Body,), {"Track":type("Track", (_Track,), {})})
        setattr(nsq, body, cls)
    nsq.NeutrinoType = types.SimpleNamespace(neutrino="neutrino", antineutrino="antineutrino", both="both")
    nsq.Basis = types.SimpleNamespace(flavor="flavor", mass="mass")
    nsq.GSL_STEP_FUNCTIONS = types.SimpleNamespace(GSL_STEP_RKF45="rkf45", GSL_STEP_RK4="rk4")
    if with_decay:
        nsq.nuSQUIDSDecay = FakeDecay
    return nsq


@pytest.fixture
def fake_nsq():
    return make_fake_nsq()

@pytest.fixture
def bare_nsq():
    return make_fake_nsq(with_decay=False)

@pytest.fixture
def engine(fake_nsq):
    return fake_nsq, FakeDecay
