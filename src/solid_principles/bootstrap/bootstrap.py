"""Bootstrap the demonstration bus with handlers and their collaborators."""

from __future__ import annotations

import functools
import inspect
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

from solid_principles.adapters.clocks import SystemClock
from solid_principles.adapters.sinks import ConsoleSink
from solid_principles.service_layer.demobus import DemoBus
from solid_principles.service_layer.handlers import COMMAND_HANDLERS

if TYPE_CHECKING:
    from solid_principles.interfaces.clock import Clock
    from solid_principles.interfaces.output_sink import OutputSink
    from solid_principles.service_layer.commands import Command


@dataclass(frozen=True)
class AppContainer:
    """A class to hold the wired application."""

    demo_bus: DemoBus
    sink: OutputSink
    clock: Clock


def build_demo_bus(
    sink: OutputSink,
    clock: Clock,
    command_handlers: dict[type[Command], Callable[..., None]],
) -> DemoBus:
    """Build a demonstration bus with injected dependencies."""
    dependencies = {"sink": sink, "clock": clock}
    injected_command_handlers = {
        command_type: inject_dependencies(handler, dependencies)
        for command_type, handler in command_handlers.items()
    }

    return DemoBus(command_handlers=injected_command_handlers)


def bootstrap(sink: OutputSink | None = None, clock: Clock | None = None) -> AppContainer:
    """Wire the application.

    Args:
        sink: Where illustration output goes. Defaults to the console.
        clock: Time source for log timestamps. Defaults to the system clock.
    """
    sink = sink if sink is not None else ConsoleSink()
    clock = clock if clock is not None else SystemClock()
    demo_bus = build_demo_bus(sink, clock, COMMAND_HANDLERS)

    return AppContainer(demo_bus=demo_bus, sink=sink, clock=clock)


def inject_dependencies(
    handler: Callable, dependencies: Mapping[str, object]
) -> Callable:
    """Inject dependencies into a handler function based on its parameters."""
    params = inspect.signature(handler).parameters
    deps = {
        name: dependency for name, dependency in dependencies.items() if name in params
    }
    return functools.partial(handler, **deps)
