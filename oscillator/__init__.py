"""
Spring-Damper Integration Comparison

This package advances a damped harmonic oscillator with several fixed-step
integrators and compares each run against the closed-form solution.
"""

from oscillator.params import DynamicsParams
from oscillator.state import Derivative, Sample, State
from oscillator.dynamics import ConstantForce, SpringDamper, analytic_position
from oscillator.evaluator import evaluate
from oscillator.integrators import (
    INTEGRATORS,
    explicit_euler,
    get_integrator,
    implicit_euler,
    rk4,
    semi_implicit_euler,
)
from oscillator.simulator import Trajectory, record, run
from oscillator.sinks import CsvFileSink, MemorySink, TextFileSink
from oscillator.analysis import TrajectoryAnalyzer
from oscillator.scenarios import Scenario, compare_integrators, default_scenarios, run_scenarios

__all__ = [
    "DynamicsParams",
    "State",
    "Derivative",
    "Sample",
    "SpringDamper",
    "ConstantForce",
    "analytic_position",
    "evaluate",
    "INTEGRATORS",
    "explicit_euler",
    "semi_implicit_euler",
    "implicit_euler",
    "rk4",
    "get_integrator",
    "Trajectory",
    "run",
    "record",
    "MemorySink",
    "TextFileSink",
    "CsvFileSink",
    "TrajectoryAnalyzer",
    "Scenario",
    "default_scenarios",
    "run_scenarios",
    "compare_integrators",
]
