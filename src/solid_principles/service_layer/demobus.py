"""Dispatcher that runs illustrations.

The bus routes each command to the handler registered for its type, logs
which principle ran and in which form, and keeps a short record of every
run so the caller can report on a batch (``solid demo all``).
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from solid_principles.domain.errors import DomainError

from .commands import Command

logger = logging.getLogger(__name__)

# pylint: disable=too-few-public-methods


class NoHandlerForCommand(LookupError):
    """Raised when no handler is registered for a command type."""

    def __init__(self, cmd: Command) -> None:
        super().__init__(f"No handler found for command {type(cmd).__name__}")


@dataclass(frozen=True)
class Run:
    """Outcome of one illustration.

    ``error`` holds the domain error message when the illustration stopped
    on the failure it demonstrates, and is None otherwise.
    """

    label: str
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def describe(cmd: Command) -> str:
    """Human label for `cmd`, e.g. ``"OCP illustration (before)"``."""
    if cmd.principle is None:
        return f"{type(cmd).__name__} ({cmd.form})"
    return f"{cmd.principle.name} illustration ({cmd.form})"


class DemoBus:
    """Run illustrations by handing each command to its handler.

    Args:
        command_handlers: Command type to handler. Handlers take the command
            only; the sink and clock are injected by
            `solid_principles.bootstrap`.
    """

    def __init__(
        self,
        command_handlers: dict[type[Command], Callable[..., None]],
    ) -> None:
        self._command_handlers = command_handlers
        self._runs: list[Run] = []

    @property
    def runs(self) -> list[Run]:
        """Every illustration handled so far, oldest first."""
        return list(self._runs)

    def handle(self, cmd: Command) -> None:
        """Run the illustration requested by `cmd`.

        Raises:
            NoHandlerForCommand: If the command type has no handler.
            DomainError: When a "before" design hits the failure it
                illustrates. The run is recorded before the error propagates.
        """
        handler = self._command_handlers.get(type(cmd))
        if handler is None:
            logger.error("No handler registered for %s", type(cmd).__name__)
            raise NoHandlerForCommand(cmd)

        label = describe(cmd)
        logger.info("Running %s", label)
        logger.debug("%s options: %s", label, cmd)
        try:
            handler(cmd)
        except DomainError as e:
            logger.info("%s stopped: %s", label, e)
            self._runs.append(Run(label, str(e)))
            raise
        self._runs.append(Run(label))
        logger.debug("%s finished", label)
