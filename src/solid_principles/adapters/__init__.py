"""Adapters (concrete variants) for solid_principles.

Provide concrete implementations of the capability contracts declared in
`solid_principles.interfaces`: output sinks, clocks, the activity logger,
payment methods, storage backends and printers.

Dependency rule: may import `solid_principles.interfaces` and
`solid_principles.domain`; neither of those may import this package.
"""
