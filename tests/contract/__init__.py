"""Contract tests.

Every variant of a capability contract must behave the same way at the call
sites that consume it. Fixtures here are parametrized over all variants, so
a new variant is covered by adding one entry to its fixture.
"""
