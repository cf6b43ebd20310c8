"""Catalogue of the SOLID principles.

Reference text shown by the ``solid overview``, ``solid principles`` and
``solid explain`` commands: a statement of each principle, why it is used,
its advantages and disadvantages, plus the general overview of SOLID.
"""

from dataclasses import dataclass
from enum import Enum

from .errors import UnrecognizedCaseError


class Principle(Enum):
    """The five SOLID principles, keyed by their usual abbreviation."""

    SRP = "srp"
    OCP = "ocp"
    LSP = "lsp"
    ISP = "isp"
    DIP = "dip"


@dataclass(frozen=True)
class PrincipleInfo:
    """Value object describing one principle."""

    principle: Principle
    title: str
    statement: str
    why_use: str
    advantages: str
    disadvantages: str
    domain: str
    reference_url: str

    @property
    def code(self) -> str:
        """Upper-case abbreviation, e.g. ``"SRP"``."""
        return self.principle.name


@dataclass(frozen=True)
class Overview:
    """Value object holding the general discussion of SOLID."""

    summary: tuple[str, ...]
    advantages: tuple[str, ...]
    disadvantages: tuple[str, ...]
    conclusion: tuple[str, ...]


PRINCIPLES: dict[Principle, PrincipleInfo] = {
    Principle.SRP: PrincipleInfo(
        principle=Principle.SRP,
        title="Single Responsibility Principle",
        statement=(
            "A class should have only one reason to change, meaning it should "
            "have only one responsibility or function."
        ),
        why_use=(
            "Reduces code complexity and avoids tightly coupled code, making "
            "debugging and updates easier."
        ),
        advantages=(
            "Improves code readability and maintainability, reduces bugs during "
            "changes."
        ),
        disadvantages=(
            "Can increase the number of classes, adding to initial development time."
        ),
        domain="users and logging",
        reference_url="https://en.wikipedia.org/wiki/Single-responsibility_principle",
    ),
    Principle.OCP: PrincipleInfo(
        principle=Principle.OCP,
        title="Open/Closed Principle",
        statement=(
            "Software entities should be open for extension but closed for "
            "modification."
        ),
        why_use=(
            "Ensures flexibility and adaptability to future requirements without "
            "altering existing code."
        ),
        advantages="Facilitates scalability and protects existing functionality.",
        disadvantages=(
            "Requires careful planning and abstraction, which can be time-consuming."
        ),
        domain="customer discounts",
        reference_url="https://en.wikipedia.org/wiki/Open%E2%80%93closed_principle",
    ),
    Principle.LSP: PrincipleInfo(
        principle=Principle.LSP,
        title="Liskov Substitution Principle",
        statement=(
            "Objects of a superclass should be replaceable with objects of its "
            "subclasses without altering the program's correctness."
        ),
        why_use=(
            "Ensures derived classes are substitutable, maintaining program stability."
        ),
        advantages=(
            "Enhances code reusability and reduces errors from unexpected behavior."
        ),
        disadvantages=(
            "Over-engineering to strictly adhere to this principle can complicate code."
        ),
        domain="payment processing",
        reference_url="https://en.wikipedia.org/wiki/Liskov_substitution_principle",
    ),
    Principle.ISP: PrincipleInfo(
        principle=Principle.ISP,
        title="Interface Segregation Principle",
        statement=(
            "A class should not be forced to implement interfaces it does not use; "
            "create smaller, specific interfaces instead."
        ),
        why_use='Prevents creating "fat" interfaces with irrelevant methods for some classes.',
        advantages=(
            "Simplifies implementation and reduces coupling between classes and "
            "interfaces."
        ),
        disadvantages=(
            "Can lead to a larger number of interfaces, increasing management overhead."
        ),
        domain="printers",
        reference_url="https://en.wikipedia.org/wiki/Interface_segregation_principle",
    ),
    Principle.DIP: PrincipleInfo(
        principle=Principle.DIP,
        title="Dependency Inversion Principle",
        statement=(
            "High-level modules should not depend on low-level modules; both "
            "should depend on abstractions."
        ),
        why_use="Decouples modules, making the system more flexible and reusable.",
        advantages=(
            "Improves module independence and testability, easier modification "
            "and extension."
        ),
        disadvantages="Adds complexity due to managing abstractions.",
        domain="databases",
        reference_url="https://en.wikipedia.org/wiki/Dependency_inversion_principle",
    ),
}


OVERVIEW = Overview(
    summary=(
        "SOLID principles improve modularity, readability, and maintainability of code.",
        "They support scalable, testable, and less error-prone systems.",
    ),
    advantages=(
        "Improved Maintainability: Enables safer changes to the system with minimal risk.",
        "Enhanced Testability: Independent components simplify unit testing.",
        "Better Scalability: Facilitates adaptation to changing requirements.",
        "Reduced Code Complexity: Makes debugging and enhancements straightforward.",
        "Facilitates Collaboration: Modular design allows separate team development.",
    ),
    disadvantages=(
        "Initial Overhead: Requires careful planning and abstraction.",
        "Over-Engineering: Strict adherence can lead to unnecessary complexity.",
        "Learning Curve: Developers need time to understand and apply these principles.",
        "Increased Class/Interface Count: Leads to navigation challenges for newcomers.",
    ),
    conclusion=(
        "SOLID principles are key to effective object-oriented design.",
        "Proper application ensures robust, maintainable, and adaptable systems.",
        "Balance their use with practical needs to avoid over-engineering.",
    ),
)


def get_principle(code: str | Principle) -> PrincipleInfo:
    """Look up a principle by its abbreviation (case-insensitive).

    Args:
        code: ``"srp"``, ``"OCP"``, ... or a `Principle` member.

    Returns:
        PrincipleInfo: The matching catalogue entry.

    Raises:
        UnrecognizedCaseError: If the code names no principle.
    """
    if isinstance(code, Principle):
        return PRINCIPLES[code]
    try:
        return PRINCIPLES[Principle(code.strip().lower())]
    except ValueError as e:
        raise UnrecognizedCaseError(code, f"Unknown principle: {code!r}") from e
