"""Entrypoints (inbound adapters) for solid_principles.

Expose the application to the outside world through the ``solid`` CLI. Parse
and validate inputs, build commands, hand them to the bootstrapped bus and
present results.

Dependency rule: may import `solid_principles.bootstrap`,
`solid_principles.service_layer` and `solid_principles.domain`; avoid
importing `solid_principles.adapters` directly.
"""
