"""
Accuracy and stability analysis of sampled trajectories
"""

from typing import TYPE_CHECKING, Any, Dict

import numpy as np

from oscillator.state import State

if TYPE_CHECKING:
    from oscillator.dynamics import ConstantForce, SpringDamper


class TrajectoryAnalyzer:
    """Compares a sampled trajectory with the model's reference solution"""

    def __init__(self, model: "SpringDamper | ConstantForce", divergence_factor: float = 10.0) -> None:
        """
        Initialize trajectory analyzer

        Args:
            model: Force model the trajectory was integrated with
            divergence_factor: Peak amplitude, relative to the initial one,
                above which a run counts as diverged
        """
        self.model = model
        self.divergence_factor = divergence_factor

    def analyze(self, t: np.ndarray, state: np.ndarray) -> Dict[str, Any]:
        """
        Analyze one trajectory

        Args:
            t: Time array
            state: State history [N x 2] of (position, velocity)

        Returns:
            Dictionary with analysis results
        """
        position = state[:, 0]
        velocity = state[:, 1]
        initial_state = State(float(position[0]), float(velocity[0]))

        reference = self.model.reference_solution(t, initial_state)
        error = np.abs(position - reference[:, 0])

        # Errors are relative to the reference's peak excursion, since the
        # reference passes through zero every half period
        scale = float(np.max(np.abs(reference[:, 0])))
        if scale == 0.0:
            scale = 1.0
        initial_amplitude = abs(initial_state.position) or scale

        max_abs_error = float(np.max(error))
        max_amplitude = float(np.max(np.abs(position)))

        energy = self.model.energy(position, velocity)
        initial_energy = float(energy[0])
        final_energy = float(energy[-1])
        energy_ratio = final_energy / initial_energy if initial_energy != 0.0 else float("nan")

        # Peak amplitude per window; a positive trend means growing oscillation
        n_windows = 5
        window_size = max(len(position) // n_windows, 1)
        amplitudes: list[float] = []
        for i in range(n_windows):
            start_idx = i * window_size
            end_idx = (i + 1) * window_size if i < n_windows - 1 else len(position)
            window = position[start_idx:end_idx]
            if len(window) > 0:
                amplitudes.append(float(np.max(np.abs(window))))

        if len(amplitudes) >= 2 and np.all(np.isfinite(amplitudes)):
            amplitude_trend = float(np.polyfit(range(len(amplitudes)), amplitudes, 1)[0])
            is_growing = amplitude_trend > 1e-3 * initial_amplitude
        else:
            amplitude_trend = 0.0
            is_growing = False

        zero_crossings = int(np.sum(np.diff(np.sign(position)) != 0))

        return {
            "max_abs_error": max_abs_error,
            "max_relative_error": max_abs_error / scale,
            "final_error": float(error[-1]),
            "initial_energy": initial_energy,
            "final_energy": final_energy,
            "energy_ratio": energy_ratio,
            "max_amplitude": max_amplitude,
            "amplitude_trend": amplitude_trend,
            "is_growing": bool(is_growing),
            "zero_crossings": zero_crossings,
            "diverged": bool(max_amplitude > self.divergence_factor * initial_amplitude),
        }
