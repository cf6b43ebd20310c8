"""Interfaces (capability contracts) for solid_principles.

Defines the abstract contracts that concrete variants implement and that call
sites depend on: output sinks, clocks, activity loggers, payments, databases
and the segregated printer capabilities. Each contract lists only the
operations a consumer actually invokes.

Dependency rule: this package is independent; do not import from any other
`solid_principles.*` modules. It may be imported by the domain, adapters,
service layer and bootstrap.
"""
