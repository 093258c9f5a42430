"""
Derivative evaluation shared by every integrator
"""

from typing import TYPE_CHECKING

from oscillator.state import Derivative, State

if TYPE_CHECKING:
    from oscillator.dynamics import ConstantForce, SpringDamper


def evaluate(
    initial: State,
    dt_offset: float,
    trial: Derivative,
    model: "SpringDamper | ConstantForce",
) -> Derivative:
    """
    Derivative of the state at a probe point ahead of `initial`

    Args:
        initial: State at the start of the step
        dt_offset: How far ahead to probe (s)
        trial: Derivative used to extrapolate to the probe point
        model: Force model supplying mass and force law

    Returns:
        Derivative (velocity, acceleration) at the probe state
    """
    probe = State(
        initial.position + trial.d_position * dt_offset,
        initial.velocity + trial.d_velocity * dt_offset,
    )
    return Derivative(probe.velocity, model.force(probe) / model.mass)
