from nudecay.flux import read_flux, initial_state, pure_flavor_state, flux_filename, output_path, write_flux
import numpy as np
import os
import pytest

class TestReadFlux():
    @pytest.fixture
    def flux_file(self, tmp_path):
        path = tmp_path / "flux.dat"
        path.write_text("# E nu nubar\n0.1  1.0 2.0\n0.2\t3.0  4.0\n0.3 5.0 6.0\n")
        return str(path)

    def test_read(self, flux_file):
        table = read_flux(flux_file)
        assert table.shape == (3,3)
        assert np.allclose(table[:,0], [0.1, 0.2, 0.3])
        assert np.allclose(table[1], [0.2, 3.0, 4.0])

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_flux(str(tmp_path / "nofile.dat"))

    def test_too_few_columns(self, flux_file):
        with pytest.raises(ValueError):
            read_flux(flux_file, ncols=4)


class TestInitialState():
    @pytest.fixture
    def flux(self):
        E = np.array([0.1, 0.2, 0.3, 0.4])
        return np.array([E, 10*E, 20*E]).T

    def test_node_by_node(self, flux):
        state = initial_state(flux[:3,0], flux, 4)
        assert state.shape == (3, 2, 4)
        assert np.allclose(state[:,0,1], flux[:3,1])
        assert np.allclose(state[:,1,1], flux[:3,2])
        state[:,:,1] = 0.
        assert np.all(state == 0.)

    def test_flavor_and_columns(self, flux):
        state = initial_state(flux[:,0], flux, 3, flavor=0, columns=(2, 1))
        assert np.allclose(state[:,0,0], flux[:,2])
        assert np.allclose(state[:,1,0], flux[:,1])

    def test_too_few_rows(self, flux):
        with pytest.raises(ValueError):
            initial_state(np.linspace(0.1, 0.4, 10), flux, 4)

    def test_interpolate(self, flux):
        E = np.array([0.2, 0.25, 1.0])
        state = initial_state(E, flux, 4, interpolate=True)
        assert state[0,0,1] == pytest.approx(2.0)
        assert state[0,1,1] == pytest.approx(4.0)
        assert 2.0 < state[1,0,1] < 3.0
        #outside of the tabulated range
        assert state[2,0,1] == 0.

    def test_pure_flavor(self):
        state = pure_flavor_state(5, 4, flavor=2)
        assert state.shape == (5, 2, 4)
        assert np.all(state[:,:,2] == 1.)
        assert np.sum(state) == 10.


class TestWriteFlux():
    def test_filename(self):
        assert flux_filename("ub_final", 1, 0.5, 2) == "ub_final_m1.000_t0.500_c2.000"
        assert flux_filename("ub_final", 0.12345, 1.0, 3.14159) == "ub_final_m0.123_t1.000_c3.142"

    def test_output_path(self):
        assert output_path(os.path.join("..", "output"), "ub_initial") == os.path.join("..", "output", "ub_initial.dat")

    def test_write(self, tmp_path):
        path = str(tmp_path / "out" / "flux.dat")
        write_flux(path, [1e9, 2e9], [[0.5, 0.25], [0.1, 0.2]])

        lines = open(path).read().strip().split("\n")
        assert len(lines) == 2
        assert [float(x) for x in lines[0].split(" ")] == [1e9, 0.5, 0.1]

        table = read_flux(path)
        assert np.allclose(table, [[1e9, 0.5, 0.1], [2e9, 0.25, 0.2]])

    def test_significant_digits(self, tmp_path):
        path = str(tmp_path / "flux.dat")
        write_flux(path, [2.5125e9], [[1/3], [2/3]])
        assert open(path).read().strip() == "2.5125e+09 0.333333 0.666667"
