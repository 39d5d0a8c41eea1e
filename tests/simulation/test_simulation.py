from nudecay.simulation import DecaySimulation, SWITCHES, format_table
from nudecay.units import Units
import numpy as np
import pytest

class TestDecaySimulation():
    @pytest.fixture
    def sim(self, engine):
        return DecaySimulation("run_decay", engine=engine, units=Units(), quiet=True)

    def test_init(self, sim, fake_nsq):
        assert sim.scenario.name == "run_decay"
        assert sim.nsq is fake_nsq
        assert sim.nus is None
        assert sim.settings["rel_error"] == 1e-16
        assert sim.settings["abs_error"] == 1e-16
        assert sim.settings["h"] is None

    def test_update_settings(self, sim, capsys):
        sim.update_settings(h=0.1, foo=1)
        assert sim.settings["h"] == 0.1
        assert "foo" in capsys.readouterr().out

    def test_create(self, sim):
        sim.update_settings(h=0.1, h_max=1.0, gsl_step="rkf45")
        nus = sim.create([1e9, 2e9], 4, "both")
        assert sim.nus is nus
        assert nus.numneu == 4
        assert nus.args == ("both",)
        assert nus.called("Set_rel_error") == [(1e-16,)]
        assert nus.called("Set_abs_error") == [(1e-16,)]
        assert nus.called("Set_GSL_step") == [("rkf45",)]
        assert nus.called("Set_h")[0][0] == pytest.approx(0.1*Units().km)
        assert nus.called("Set_h_max")[0][0] == pytest.approx(Units().km)
        assert nus.called("Set_ProgressBar") == []

    def test_set_body(self, sim, fake_nsq):
        sim.create([1e9], 4)
        sim.set_body("earth_atm", zenith=1.0)
        body, = sim.nus.called("Set_Body")[0]
        track, = sim.nus.called("Set_Track")[0]
        assert isinstance(body, fake_nsq.EarthAtm)
        assert track.x == 1.0

    def test_set_mixing(self, sim):
        sim.create([1e9], 4)
        sim.set_mixing(angles={(1,3):0.2}, square_mass_differences={3:1.0}, cp_phases={(0,2):0.5})
        assert sim.nus.called("Set_MixingAngle") == [(1, 3, 0.2)]
        assert sim.nus.called("Set_SquareMassDifference") == [(3, 1.0)]
        assert sim.nus.called("Set_CPPhase") == [(0, 2, 0.5)]

    def test_set_masses(self, sim):
        sim.create([1e9], 2)
        sim.set_masses([0., 0.5], m_phi=0.1)
        assert sim.nus.called("Set_m_phi") == [(0.1,)]
        assert sim.nus.called("Set_m_nu") == [(0., 0), (0.5, 1)]

    def test_switches(self, sim):
        sim.create([1e9], 4)
        sim.set_switches(majorana=False, tau_regeneration=True)
        assert sim.nus.called(SWITCHES["majorana"]) == [(False,)]
        assert sim.nus.called(SWITCHES["tau_regeneration"]) == [(True,)]

    def test_unknown_switch(self, sim):
        sim.create([1e9], 4)
        with pytest.raises(KeyError):
            sim.set_switches(dark_matter=True)

    def test_flavor_table(self, sim):
        sim.create([1e9, 2e9, 3e9], 3)
        state = np.arange(18, dtype=float).reshape(3, 2, 3)
        sim.set_initial_state(state)
        assert sim.nus.called("Set_initial_state")[0][1] == "flavor"

        table = sim.flavor_table()
        assert table.shape == (3, 7)
        assert np.allclose(table[:,0], [1., 2., 3.])
        assert np.allclose(table[0,1:], [0., 1., 2., 3., 4., 5.])

        table = sim.flavor_table(flavors=[1], at_nodes=False, energy_unit=1.)
        assert table.shape == (3, 3)
        assert np.allclose(table[:,0], [1e9, 2e9, 3e9])
        assert np.allclose(table[2,1:], [13., 16.])

    def test_energies(self, sim):
        sim.create([1e9, 5e9], 4)
        assert np.allclose(sim.energies(), [1., 5.])


class TestRunDecay():
    @pytest.fixture
    def sim(self, engine):
        return DecaySimulation("run_decay", engine=engine, units=Units(), quiet=True)

    def test_run(self, sim, capsys):
        table = sim.run()

        assert table.shape == (10, 9)
        assert np.allclose(table[:,0], np.logspace(2, 3, 10))
        #pure muon flavor, damped by the fake evolution
        assert np.allclose(table[:,2], 0.5)
        assert np.allclose(table[:,6], 0.5)
        assert np.sum(table[:,1:]) == pytest.approx(10.)

        lines = capsys.readouterr().out.strip().split("\n")
        assert len(lines) == 10
        assert len(lines[0].split(" ")) == 9

    def test_build(self, sim):
        nus = sim.scenario.build(sim)
        assert nus is sim.nus
        assert nus.called("Compute_DT") == [()]

    def test_engine_calls(self, sim):
        sim.run()
        nus = sim.nus

        assert nus.called("Set_SquareMassDifference") == [(3, 1.0)]
        assert len(nus.called("Set_MixingParametersToDefault")) == 1
        assert nus.called("Set_MixingAngle") == [(0, 3, 0.785398), (1, 3, 0.785398), (2, 3, 0.785398)]
        assert nus.called("Set_m_phi") == [(0.0,)]
        masses = [args[0] for args in nus.called("Set_m_nu")]
        assert masses == pytest.approx([0., np.sqrt(7.65e-05), np.sqrt(2.47e-03), 1.0])
        assert nus.called("Set_IncoherentInteractions") == [(False,)]
        assert nus.called("Set_Majorana") == [(True,)]
        assert nus.called("Set_OtherRhoTerms") == [(True,)]

        cpp, cvp = nus.called("Set_Scalar_Matrices")[0]
        assert cpp[0,3] == pytest.approx(0.01)
        assert cvp[3,3] == pytest.approx(0.03)
        assert len(nus.called("Set_Pseudoscalar_Matrices")) == 1

        order = [call for call, _ in nus.calls]
        assert order.index("Set_Pseudoscalar_Matrices") < order.index("Compute_DT") < order.index("EvolveState")
        assert order[-1] == "EvolveState"

    def test_show_rates(self, engine, capsys):
        sim = DecaySimulation("run_decay", engine=engine, units=Units(), settings={"show_rates":True}, quiet=True)
        sim.run()
        assert "cpp_scalar:" in capsys.readouterr().out

    def test_closed_channels(self, engine):
        sim = DecaySimulation("run_decay", engine=engine, units=Units(), settings={"channels":[(2,3)]}, quiet=True)
        sim.run()
        cpp, _ = sim.nus.called("Set_Scalar_Matrices")[0]
        assert cpp[2,3] == pytest.approx(0.01)
        assert cpp[0,3] == pytest.approx(1e-60)


def test_format_table():
    assert format_table(np.array([[1., 0.5], [2., 0.25]])) == "1 0.5\n2 0.25"
