"""Bootstrap (composition root) for solid_principles.

Assembles the application at runtime: picks the concrete output sink and
clock, injects them into the service-layer handlers and builds the
demonstration bus.

Import rules:
- Entry points import *this* package rather than wiring adapters themselves.
- This package may import every other `solid_principles` package.
- Inner layers must not import `solid_principles.bootstrap`.
"""

from .bootstrap import AppContainer, bootstrap, build_demo_bus, inject_dependencies

__all__ = ["AppContainer", "bootstrap", "build_demo_bus", "inject_dependencies"]
