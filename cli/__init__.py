"""CLI package for parsing sensor logs and inspecting their event logs."""

from importlib import import_module
from types import ModuleType


def __getattr__(name: str) -> ModuleType:
    if name == "app":
        return import_module("cli.app")
    raise AttributeError(name)

# The Typer application lives in ``cli.app``. It is not re-exported from the
# package root so that ``cli.app`` keeps resolving to the module itself, which
# is the path tests use when patching its collaborators.

__all__ = []
