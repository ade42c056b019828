"""
Workflow orchestration.

Runs the fixed table edit sequence (load, inspect, update, write, display)
against paths and positions supplied by configuration.
"""
