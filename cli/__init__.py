"""Command-line access to the energy analytics service."""

from importlib import import_module
from types import ModuleType


def __getattr__(name: str) -> ModuleType:
    # ``cli.app`` must stay the module (tests patch ``cli.app.ApiClient``), not the Typer instance.
    if name == "app":
        return import_module("cli.app")
    raise AttributeError(name)


__all__ = []
