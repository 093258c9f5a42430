"""
Fixed-step integrators

Each step function advances `state` in place by exactly one step of size `dt`
and returns it. All four read forces through `evaluate`, so the schemes differ
only in how they combine derivatives and in the order they write position and
velocity.
"""

from typing import TYPE_CHECKING, Callable, Dict

from oscillator.evaluator import evaluate
from oscillator.state import Derivative, State

if TYPE_CHECKING:
    from oscillator.dynamics import ConstantForce, SpringDamper

    Model = SpringDamper | ConstantForce

Integrator = Callable[[State, float, float, "Model"], State]


def explicit_euler(state: State, t: float, dt: float, model: "Model") -> State:
    """
    Explicit (forward) Euler

    Position advances with the pre-step velocity, then velocity advances with
    the acceleration of the pre-step state. Unstable for an undamped spring
    at any step size.
    """
    acceleration = evaluate(state, 0.0, Derivative(), model).d_velocity
    state.position = state.position + state.velocity * dt
    state.velocity = state.velocity + acceleration * dt
    return state


def semi_implicit_euler(state: State, t: float, dt: float, model: "Model") -> State:
    """
    Semi-implicit (symplectic) Euler

    Velocity advances first; position then uses the updated velocity.
    """
    acceleration = evaluate(state, 0.0, Derivative(), model).d_velocity
    state.velocity = state.velocity + acceleration * dt
    state.position = state.position + state.velocity * dt
    return state


def implicit_euler(state: State, t: float, dt: float, model: "Model") -> State:
    """
    The "implicit Euler" comparison scenario

    Kept under its historical name for the comparison runs. This is the
    velocity-first semi-implicit update, not a backward Euler solve: no
    linear system is solved and no root finding takes place.
    """
    return semi_implicit_euler(state, t, dt, model)


def rk4(state: State, t: float, dt: float, model: "Model") -> State:
    """Classic fourth-order Runge-Kutta"""
    a = evaluate(state, 0.0, Derivative(), model)
    b = evaluate(state, dt * 0.5, a, model)
    c = evaluate(state, dt * 0.5, b, model)
    d = evaluate(state, dt, c, model)

    dxdt = 1.0 / 6.0 * (a.d_position + 2.0 * (b.d_position + c.d_position) + d.d_position)
    dvdt = 1.0 / 6.0 * (a.d_velocity + 2.0 * (b.d_velocity + c.d_velocity) + d.d_velocity)

    state.position = state.position + dxdt * dt
    state.velocity = state.velocity + dvdt * dt
    return state


INTEGRATORS: Dict[str, Integrator] = {
    "explicit_euler": explicit_euler,
    "semi_implicit_euler": semi_implicit_euler,
    "implicit_euler": implicit_euler,
    "rk4": rk4,
}


def get_integrator(name: str) -> Integrator:
    """Look up a step function by name"""
    try:
        return INTEGRATORS[name]
    except KeyError:
        raise ValueError(
            f"Unknown integrator {name!r}, expected one of {sorted(INTEGRATORS)}"
        ) from None
