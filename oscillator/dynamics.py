"""
Oscillator dynamics: force laws and closed-form trajectories
"""

from typing import Union

import numpy as np
from scipy.integrate import odeint

from oscillator.params import DynamicsParams
from oscillator.state import State

TimeLike = Union[float, np.ndarray]


def spring_damper_force(state: State, params: DynamicsParams) -> float:
    """Linear restoring force plus linear damping: F = -k*x - b*v"""
    return -params.spring_constant * state.position - params.damping * state.velocity


def constant_force(state: State, force: float) -> float:
    """Externally supplied force, independent of the state"""
    return force


def analytic_position(t: TimeLike, params: DynamicsParams, initial_position: float) -> TimeLike:
    """
    Closed-form position of the undamped spring released from rest

    Args:
        t: Time (s), scalar or array
        params: Oscillator parameters, damping must be zero
        initial_position: Position at t=0 (m)

    Returns:
        y0 * cos(sqrt(k/m) * t)
    """
    if not params.is_undamped:
        raise ValueError("analytic_position has no closed form for damping != 0")
    return initial_position * np.cos(params.natural_frequency * t)


class SpringDamper:
    """Unit point mass on a linear spring with linear damping"""

    def __init__(self, params: DynamicsParams) -> None:
        self.params = params

    @property
    def mass(self) -> float:
        return self.params.mass

    @property
    def is_analytic(self) -> bool:
        """True when a closed-form trajectory exists (undamped spring)"""
        return self.params.is_undamped

    def force(self, state: State) -> float:
        return spring_damper_force(state, self.params)

    def acceleration(self, state: State) -> float:
        return self.force(state) / self.params.mass

    def energy(self, position: TimeLike, velocity: TimeLike) -> TimeLike:
        """Kinetic plus spring potential energy"""
        return 0.5 * self.params.mass * velocity**2 + 0.5 * self.params.spring_constant * position**2

    def analytic_position(self, t: TimeLike, initial_state: State) -> TimeLike:
        """
        Closed-form position for the undamped spring

        Reduces to `analytic_position` when the initial velocity is zero.
        """
        omega = self.params.natural_frequency
        if initial_state.velocity == 0.0:
            return analytic_position(t, self.params, initial_state.position)
        if not self.is_analytic:
            raise ValueError("analytic_position has no closed form for damping != 0")
        if omega == 0.0:
            return initial_state.position + initial_state.velocity * t
        return initial_state.position * np.cos(omega * t) + initial_state.velocity / omega * np.sin(omega * t)

    def analytic_velocity(self, t: TimeLike, initial_state: State) -> TimeLike:
        """Time derivative of `analytic_position`"""
        if not self.is_analytic:
            raise ValueError("analytic_velocity has no closed form for damping != 0")
        omega = self.params.natural_frequency
        if omega == 0.0:
            return initial_state.velocity + 0.0 * t
        return -initial_state.position * omega * np.sin(omega * t) + initial_state.velocity * np.cos(omega * t)

    def reference_solution(self, t: np.ndarray, initial_state: State) -> np.ndarray:
        """
        Reference trajectory for comparison

        Uses the closed form when it exists, otherwise a tightly toleranced
        odeint solution.

        Args:
            t: Time array (s)
            initial_state: State at t[0]

        Returns:
            Array [N x 2] of (position, velocity)
        """
        if self.is_analytic:
            return np.column_stack([
                self.analytic_position(t, initial_state),
                self.analytic_velocity(t, initial_state),
            ])
        return odeint(
            self._derivative,
            [initial_state.position, initial_state.velocity],
            t,
            rtol=1e-10,
            atol=1e-10,
        )

    def _derivative(self, y: np.ndarray, t: float) -> list[float]:
        """d[x, v]/dt in the form odeint expects"""
        position, velocity = y
        return [velocity, self.acceleration(State(position, velocity))]


class ConstantForce:
    """Unit point mass pushed by a constant external force"""

    def __init__(self, force: float = 10.0, mass: float = 1.0) -> None:
        self.applied_force = force
        self.params = DynamicsParams(mass=mass, spring_constant=0.0, damping=0.0)

    @property
    def mass(self) -> float:
        return self.params.mass

    @property
    def is_analytic(self) -> bool:
        return True

    def force(self, state: State) -> float:
        return constant_force(state, self.applied_force)

    def acceleration(self, state: State) -> float:
        return self.force(state) / self.params.mass

    def energy(self, position: TimeLike, velocity: TimeLike) -> TimeLike:
        """Kinetic energy minus the work done by the applied force"""
        return 0.5 * self.params.mass * velocity**2 - self.applied_force * position

    def analytic_position(self, t: TimeLike, initial_state: State) -> TimeLike:
        a = self.applied_force / self.params.mass
        return initial_state.position + initial_state.velocity * t + 0.5 * a * t**2

    def analytic_velocity(self, t: TimeLike, initial_state: State) -> TimeLike:
        a = self.applied_force / self.params.mass
        return initial_state.velocity + a * t

    def reference_solution(self, t: np.ndarray, initial_state: State) -> np.ndarray:
        return np.column_stack([
            self.analytic_position(t, initial_state),
            self.analytic_velocity(t, initial_state),
        ])
