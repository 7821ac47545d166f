"""Fuzz testing infrastructure for orderfuzz.

This package contains:
- shadow_context: Plain-dict reference model of FuzzTestContext
- test_context_state_machine: RuleBasedStateMachine branching contexts and
  calling zones against the reference model

Python 3.13+.
"""
