"""CLI package for querying the climate analytics service."""

from importlib import import_module
from types import ModuleType


def __getattr__(name: str) -> ModuleType:
    # ``cli.app`` must stay the module, not the Typer instance, so tests can
    # monkeypatch ``cli.app.ApiClient``.
    if name == "app":
        return import_module("cli.app")
    raise AttributeError(name)


__all__: list[str] = []
