"""
Simulation state representation
"""

from dataclasses import dataclass


@dataclass
class State:
    """Mechanical state of the oscillator, advanced in place by the integrators"""

    position: float  # m
    velocity: float  # m/s

    def copy(self) -> "State":
        return State(self.position, self.velocity)


@dataclass
class Derivative:
    """Rate of change of a State at some evaluation point"""

    d_position: float = 0.0  # dx/dt = velocity
    d_velocity: float = 0.0  # dv/dt = acceleration


@dataclass(frozen=True)
class Sample:
    """One trajectory sample, taken before the step that starts at `time`"""

    time: float  # s
    position: float  # m
    velocity: float  # m/s
