"""
Dalenius Test Suite
===================

Test Categories:
- Unit Tests: interval construction, curve, level assignment, config, logging
- Property Tests: invariants of the method (Hypothesis)
- Integration Tests: reference scenario and realistic samples
"""
