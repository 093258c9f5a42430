"""
Spring-Damper Integration Comparison

Writes the standard comparison runs to disk and prints how each integrator
fares against the closed-form solution of the undamped spring.
"""

import sys

from oscillator import DynamicsParams, compare_integrators, default_scenarios, run_scenarios


if __name__ == "__main__":
    output_dir = sys.argv[1] if len(sys.argv) > 1 else "output"

    for path in run_scenarios(default_scenarios(), output_dir):
        print(f"wrote {path}")

    params = DynamicsParams(mass=1.0, spring_constant=15.0, damping=0.0)
    results = compare_integrators(params=params, dt=0.01, horizon=100.0)

    print()
    print("Undamped spring, k=15, dt=0.01, horizon=100s:")
    print("-" * 80)
    for name, data in results.items():
        analysis = data["analysis"]
        print(f"\nIntegrator: {name}")
        print(f"  Max relative error: {analysis['max_relative_error']*100:.3f}%")
        print(f"  Max amplitude: {analysis['max_amplitude']:.2f}")
        print(f"  Energy ratio (final/initial): {analysis['energy_ratio']:.4f}")
        print(f"  Growing oscillations: {analysis['is_growing']}")
        print(f"  Diverged: {analysis['diverged']}")
