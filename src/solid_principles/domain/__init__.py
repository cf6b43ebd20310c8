"""Domain layer for solid_principles.

Holds the business rules of the illustrations: the user entity, customer
discount tiers, amount handling and the catalogue describing each principle.

Dependency rule: the domain may refer to `solid_principles.interfaces` for
typing only; it must not import adapters, the service layer or entrypoints.
"""
