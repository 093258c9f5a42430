"""
Comparison scenarios: which integrator, on which system, at which step size
"""

import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from oscillator.analysis import TrajectoryAnalyzer
from oscillator.dynamics import ConstantForce, SpringDamper
from oscillator.integrators import INTEGRATORS, get_integrator
from oscillator.params import DynamicsParams
from oscillator.simulator import Trajectory, record, run
from oscillator.sinks import CsvFileSink, TextFileSink
from oscillator.state import State

FORMATS = ("csv", "text")


@dataclass
class Scenario:
    """One integrator run written to one output file"""

    name: str  # output file name
    integrator: str  # key into INTEGRATORS
    model: "SpringDamper | ConstantForce"
    dt: float  # s
    horizon: float = 100.0  # s
    initial_state: State = field(default_factory=lambda: State(1000.0, 0.0))
    fmt: str = "csv"

    def __post_init__(self) -> None:
        if self.fmt not in FORMATS:
            raise ValueError(f"fmt must be one of {FORMATS}, got {self.fmt!r}")
        get_integrator(self.integrator)

    def trajectory(self) -> Trajectory:
        return run(get_integrator(self.integrator), self.initial_state, self.dt, self.horizon, self.model)


def _spring(k: float, b: float) -> SpringDamper:
    return SpringDamper(DynamicsParams(mass=1.0, spring_constant=k, damping=b))


def default_scenarios() -> List[Scenario]:
    """The standard set of comparison runs"""
    damped = _spring(15.0, 0.1)
    undamped = _spring(15.0, 0.0)
    falling = ConstantForce(force=10.0, mass=1.0)

    scenarios = [
        Scenario("explicit_euler_constant_acceleration_dt_1.0.txt", "explicit_euler", falling,
                 dt=1.0, horizon=10.0, initial_state=State(0.0, 0.0), fmt="text"),
        Scenario("explicit_euler_constant_acceleration_dt_0.01.txt", "explicit_euler", falling,
                 dt=0.01, horizon=10.0, initial_state=State(0.0, 0.0), fmt="text"),
        Scenario("explicit_euler_spring_damper.csv", "explicit_euler", damped, dt=0.01),
        Scenario("implicit_euler_spring_damper.csv", "implicit_euler", damped, dt=0.01),
        Scenario("rk4_spring_damper.csv", "rk4", damped, dt=0.01),
        Scenario("rk4_spring_no_damping.csv", "rk4", undamped, dt=0.01),
        Scenario("implicit_euler_spring_no_damping.csv", "implicit_euler", undamped, dt=0.01),
    ]
    for dt in (0.1, 0.25, 1.0):
        scenarios.append(Scenario(f"rk4_spring_no_damping_dt_{dt}.csv", "rk4", undamped, dt=dt))
        scenarios.append(
            Scenario(f"implicit_euler_spring_no_damping_dt_{dt}.csv", "implicit_euler", undamped, dt=dt)
        )
    return scenarios


def run_scenario(scenario: Scenario, output_dir: str) -> str:
    """
    Integrate one scenario into its own output file

    Args:
        scenario: Scenario to run
        output_dir: Existing directory for the output file

    Returns:
        Path of the written file
    """
    path = os.path.join(output_dir, scenario.name)
    sink_cls = CsvFileSink if scenario.fmt == "csv" else TextFileSink
    with sink_cls(path) as sink:
        record(scenario.trajectory(), sink)
    return path


def run_scenarios(scenarios: Sequence[Scenario], output_dir: str) -> List[str]:
    """Run each scenario into `output_dir`, creating it if needed"""
    os.makedirs(output_dir, exist_ok=True)
    return [run_scenario(scenario, output_dir) for scenario in scenarios]


def compare_integrators(
    integrators: Optional[Sequence[str]] = None,
    params: Optional[DynamicsParams] = None,
    dt: float = 0.01,
    horizon: float = 100.0,
    initial_state: Optional[State] = None,
) -> Dict[str, Dict[str, Any]]:
    """
    Run several integrators on the same spring-damper

    Args:
        integrators: Integrator names, all of them by default
        params: Oscillator parameters
        dt: Time step (s)
        horizon: Simulation horizon (s)
        initial_state: State at t=0, (1000, 0) by default

    Returns:
        Dictionary with results for each integrator
    """
    if integrators is None:
        integrators = list(INTEGRATORS)
    model = SpringDamper(params if params is not None else DynamicsParams())
    if initial_state is None:
        initial_state = State(1000.0, 0.0)
    analyzer = TrajectoryAnalyzer(model)
    results: Dict[str, Dict[str, Any]] = {}

    for name in integrators:
        trajectory = run(get_integrator(name), initial_state, dt, horizon, model)
        t, state = trajectory.to_arrays()
        results[name] = {
            "time": t,
            "state": state,
            "reference": model.reference_solution(t, initial_state),
            "analysis": analyzer.analyze(t, state),
            "trajectory": trajectory,
        }

    return results
