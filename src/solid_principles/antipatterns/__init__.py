"""Designs that violate a SOLID principle.

Each module keeps the "before" version of an illustration so it can be run
side by side with the compliant design. Nothing outside the demonstrations
should depend on these classes.

There is no module for the Liskov substitution principle: its illustration
only has a compliant form.
"""
