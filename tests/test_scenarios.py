"""
Integration tests for the comparison scenarios.

Tests default_scenarios, run_scenarios and compare_integrators, which
orchestrate several runs and write or analyze them.
"""

import pytest

from oscillator import (
    INTEGRATORS,
    ConstantForce,
    DynamicsParams,
    Scenario,
    SpringDamper,
    State,
    compare_integrators,
    default_scenarios,
    run_scenarios,
)
from oscillator.scenarios import run_scenario


class TestScenarios:
    """Test suite for scenario definitions and file output"""

    def test_default_scenarios(self) -> None:
        """Test the standard set of comparison runs"""
        scenarios = default_scenarios()
        names = [s.name for s in scenarios]

        assert len(scenarios) == 13
        assert len(set(names)) == len(names)
        assert "rk4_spring_no_damping_dt_1.0.csv" in names
        assert "explicit_euler_constant_acceleration_dt_0.01.txt" in names

    def test_dt_matches_name(self) -> None:
        """Test that every scenario named after a step size uses that step size"""
        for scenario in default_scenarios():
            if "_dt_" in scenario.name:
                suffix = scenario.name.rsplit("_dt_", 1)[1].rsplit(".", 1)[0]
                assert scenario.dt == float(suffix)

    def test_constant_acceleration_text_output(self, tmp_path) -> None:
        """Test the constant acceleration scenario at dt=1.0"""
        scenario = Scenario(
            "falling.txt", "explicit_euler", ConstantForce(10.0, 1.0),
            dt=1.0, horizon=10.0, initial_state=State(0.0, 0.0), fmt="text",
        )

        path = run_scenario(scenario, str(tmp_path))

        lines = (tmp_path / "falling.txt").read_text().splitlines()
        assert path == str(tmp_path / "falling.txt")
        assert len(lines) == 11
        assert lines[0] == "t=0.00: position = 0.0, velocity = 0.0"
        assert lines[-1] == "t=10.00: position = 450.0, velocity = 100.0"

    def test_spring_csv_output(self, tmp_path) -> None:
        """Test a spring scenario written as CSV"""
        scenario = Scenario(
            "spring.csv", "implicit_euler",
            SpringDamper(DynamicsParams(mass=1.0, spring_constant=15.0, damping=0.0)),
            dt=0.01,
        )

        run_scenario(scenario, str(tmp_path))

        lines = (tmp_path / "spring.csv").read_text().splitlines()
        assert lines[0] == "time,position,velocity"
        assert lines[1] == "0.00,1000.0,0.0"
        assert len(lines) == 10002
        assert lines[-1].startswith("100.00,")

    def test_run_scenarios_writes_all_files(self, tmp_path) -> None:
        """Test that every default scenario produces its file"""
        output_dir = tmp_path / "output"

        paths = run_scenarios(default_scenarios(), str(output_dir))

        assert len(paths) == 13
        for scenario in default_scenarios():
            assert (output_dir / scenario.name).exists()

    def test_invalid_format(self) -> None:
        """Test that an unknown output format is rejected"""
        with pytest.raises(ValueError, match="fmt"):
            Scenario("x.json", "rk4", ConstantForce(), dt=0.1, fmt="json")

    def test_invalid_integrator(self) -> None:
        """Test that an unknown integrator name is rejected"""
        with pytest.raises(ValueError, match="Unknown integrator"):
            Scenario("x.csv", "leapfrog", ConstantForce(), dt=0.1)


class TestCompareIntegrators:
    """Test suite for compare_integrators"""

    def test_returns_results_for_all_integrators(self) -> None:
        """Test that all integrators are compared by default"""
        results = compare_integrators(horizon=1.0)

        assert set(results) == set(INTEGRATORS)

    def test_results_contain_required_keys(self) -> None:
        """Test that results contain all required data"""
        results = compare_integrators(["rk4"], horizon=1.0)

        data = results["rk4"]
        assert "time" in data
        assert "state" in data
        assert "reference" in data
        assert "analysis" in data
        assert "trajectory" in data

    def test_state_data_shape(self) -> None:
        """Test that state data has correct shape"""
        results = compare_integrators(["rk4", "explicit_euler"], dt=0.01, horizon=1.0)

        for data in results.values():
            assert data["state"].shape == (101, 2)
            assert data["reference"].shape == (101, 2)
            assert len(data["time"]) == 101

    def test_stability_ranking(self) -> None:
        """Test the expected ranking on the undamped spring"""
        params = DynamicsParams(mass=1.0, spring_constant=15.0, damping=0.0)

        results = compare_integrators(params=params, dt=0.01, horizon=100.0)

        assert results["explicit_euler"]["analysis"]["diverged"]
        assert not results["semi_implicit_euler"]["analysis"]["diverged"]
        assert not results["implicit_euler"]["analysis"]["diverged"]
        assert results["rk4"]["analysis"]["max_relative_error"] < 0.005

    def test_results_are_reproducible(self) -> None:
        """Test that running the same comparison twice produces identical results"""
        results1 = compare_integrators(["rk4"], horizon=5.0)
        results2 = compare_integrators(["rk4"], horizon=5.0)

        assert (results1["rk4"]["state"] == results2["rk4"]["state"]).all()

    def test_custom_initial_state(self) -> None:
        """Test that the initial state is honoured"""
        results = compare_integrators(["rk4"], horizon=1.0, initial_state=State(2.0, 1.0))

        assert results["rk4"]["state"][0, 0] == 2.0
        assert results["rk4"]["state"][0, 1] == 1.0
