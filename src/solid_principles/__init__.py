"""SOLID principles

Small, runnable illustrations of the five SOLID object-oriented design
principles. Each principle is shown through a toy domain in a violating
("before") and a compliant ("after") form.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
