"""Service layer for solid_principles.

Holds the call sites that consume capability contracts, the commands and
handlers that run each illustration, and the dispatcher routing commands to
handlers.

Dependency rule: may import `solid_principles.domain`,
`solid_principles.interfaces` and `solid_principles.adapters`; must not
import entrypoints or bootstrap.
"""
