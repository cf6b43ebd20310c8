"""The ``solid`` command-line interface."""
