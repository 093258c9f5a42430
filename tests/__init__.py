"""
Test suite for Spring-Damper Integration Comparison.

This package contains unit tests organized by component:
- test_params.py: Tests for DynamicsParams class
- test_dynamics.py: Tests for force laws and closed-form solutions
- test_evaluator.py: Tests for the shared derivative evaluation
- test_integrators.py: Tests for the fixed-step integrators
- test_simulator.py: Tests for the trajectory driver
- test_sinks.py: Tests for sample output
- test_analysis.py: Tests for trajectory analysis
- test_scenarios.py: Integration tests for the comparison scenarios
- test_app.py: Tests for dashboard input validation
"""
