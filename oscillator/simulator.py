"""
Trajectory driver: runs an integrator over a fixed time horizon
"""

import math
from typing import TYPE_CHECKING, Iterator, Tuple

import numpy as np

from oscillator.integrators import Integrator
from oscillator.state import Sample, State

if TYPE_CHECKING:
    from oscillator.dynamics import ConstantForce, SpringDamper
    from oscillator.sinks import SampleSink

# Absorbs representation error in horizon / dt (e.g. 100.0 / 0.01)
_STEP_COUNT_TOLERANCE = 1e-9


class Trajectory:
    """
    Lazy, finite, restartable sequence of samples

    Every iteration starts again from a private copy of the initial state, so
    iterating twice yields identical samples and never touches the caller's
    State.
    """

    def __init__(
        self,
        integrator: Integrator,
        initial_state: State,
        dt: float,
        horizon: float,
        model: "SpringDamper | ConstantForce",
    ) -> None:
        """
        Initialize trajectory

        Args:
            integrator: Step function advancing a State by one step
            initial_state: State at t=0
            dt: Fixed time step (s)
            horizon: Last time at which a sample may be taken (s)
            model: Force model passed to every step
        """
        if not math.isfinite(dt) or dt <= 0:
            raise ValueError(f"dt must be finite and positive, got {dt}")
        if not math.isfinite(horizon) or horizon < 0:
            raise ValueError(f"horizon must be finite and non-negative, got {horizon}")

        self.integrator = integrator
        self.initial_state = initial_state.copy()
        self.dt = dt
        self.horizon = horizon
        self.model = model
        # Time is n * dt rather than a running sum, so it cannot drift
        self.steps = int(math.floor(horizon / dt + _STEP_COUNT_TOLERANCE))
        if self.steps * dt > horizon:
            self.steps -= 1

    def __len__(self) -> int:
        return self.steps + 1

    def __iter__(self) -> Iterator[Sample]:
        state = self.initial_state.copy()
        for n in range(self.steps + 1):
            t = n * self.dt
            yield Sample(t, state.position, state.velocity)
            self.integrator(state, t, self.dt, self.model)

    def to_arrays(self) -> Tuple[np.ndarray, np.ndarray]:
        """
        Collect the whole trajectory

        Returns:
            Tuple of (time_array, state_history) with state_history [N x 2]
            holding (position, velocity)
        """
        t = np.empty(len(self))
        states = np.empty((len(self), 2))
        for i, sample in enumerate(self):
            t[i] = sample.time
            states[i] = (sample.position, sample.velocity)
        return t, states


def run(
    integrator: Integrator,
    initial_state: State,
    dt: float,
    horizon: float,
    model: "SpringDamper | ConstantForce",
) -> Trajectory:
    """Build the trajectory of `integrator` from `initial_state` up to `horizon`"""
    return Trajectory(integrator, initial_state, dt, horizon, model)


def record(trajectory: Trajectory, sink: "SampleSink") -> int:
    """
    Write every sample of `trajectory` to `sink`

    Integration stops at the first failed write; the OSError propagates.

    Returns:
        Number of samples written
    """
    written = 0
    for sample in trajectory:
        sink.write(sample)
        written += 1
    return written
