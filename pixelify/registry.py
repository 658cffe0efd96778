"""Command lookup for the CLI.

A Registry maps command names to the `command` objects defined by the
modules of a commands package, and keeps each module around so the CLI
can show its docstring as help. Modules are listed with pkgutil; frozen
binaries, where pkgutil sees nothing, fall back to the package's
COMMAND_MODULES tuple. Loading happens once, on first use.
"""

from __future__ import annotations

import importlib
import pkgutil
from collections.abc import Iterator
from types import ModuleType

from pixelify.core.types import Command


class Registry:
    def __init__(self, package: str = 'pixelify.commands'):
        self.package = package
        self._entries: dict[str, tuple[Command, ModuleType]] | None = None

    def _module_names(self) -> list[str]:
        pkg = importlib.import_module(self.package)
        names = [m.name for m in pkgutil.iter_modules(pkg.__path__) if not m.name.startswith('_')]
        return names or list(getattr(pkg, 'COMMAND_MODULES', ()))

    def _load(self) -> dict[str, tuple[Command, ModuleType]]:
        if self._entries is None:
            entries: dict[str, tuple[Command, ModuleType]] = {}
            for modname in self._module_names():
                module = importlib.import_module(f'{self.package}.{modname}')
                cmd = getattr(module, 'command', None)
                if not isinstance(cmd, Command):
                    continue
                if cmd.name in entries:
                    other = entries[cmd.name][1].__name__
                    raise RuntimeError(f'Command {cmd.name!r} defined by both {other} and {module.__name__}')
                entries[cmd.name] = (cmd, module)
            self._entries = entries
        return self._entries

    def names(self) -> list[str]:
        return sorted(self._load())

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __contains__(self, name: object) -> bool:
        return name in self._load()

    def get(self, name: str) -> Command:
        entries = self._load()
        if name not in entries:
            raise KeyError(f'Unknown command: {name}. Available: {", ".join(self.names())}')
        return entries[name][0]

    def doc(self, name: str) -> str:
        """Full module docstring for a command ('' when it has none)."""
        self.get(name)
        return (self._load()[name][1].__doc__ or '').strip()

    def summary(self, name: str) -> str:
        """First docstring line, or the command's own help text."""
        doc = self.doc(name)
        return doc.splitlines()[0] if doc else self.get(name).help


commands = Registry()
