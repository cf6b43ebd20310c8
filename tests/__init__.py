"""solid_principles test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- contract/     : Shared behavior every variant of a capability contract must have.
- functional/   : User-visible flows through the CLI, asserted on output only.
- e2e/          : The full CLI stack, including logging flags and the flight recorder.

General guidance
- Capture illustration output with a MemorySink rather than patching stdout.
- Use a FixedClock wherever a timestamp ends up in the output.
- Contract tests parametrize over every variant so a new variant is checked
  by adding it to one fixture.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
"""
