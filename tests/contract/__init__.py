"""Contract tests.

Each contract is written once and run against every implementation of an
interface through a parametrized fixture, so adapters stay interchangeable.
Only the public behavior is asserted, never internals.
"""
