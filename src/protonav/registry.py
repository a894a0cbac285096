"""Registry of REPL commands — source of truth for dispatch and help.

The help reference card and the MCP tool description are both generated
from the registered :class:`CommandSpec` entries.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class CommandSpec:
    """A single REPL command."""

    name: str
    syntax: str
    category: str
    description: str = ""


class CommandRegistry:
    """Ordered collection of command specifications."""

    def __init__(self) -> None:
        self._commands: list[CommandSpec] = []
        self._map: dict[str, CommandSpec] = {}

    def register(self, spec: CommandSpec) -> None:
        """Register *spec*. A command may have several syntax lines."""
        self._commands.append(spec)
        self._map.setdefault(spec.name, spec)

    def register_many(self, specs: list[CommandSpec]) -> None:
        for spec in specs:
            self.register(spec)

    def lookup(self, name: str) -> CommandSpec | None:
        return self._map.get(name)

    @property
    def names(self) -> list[str]:
        return list(self._map)

    @property
    def commands(self) -> list[CommandSpec]:
        """All command specifications (registration order, copy)."""
        return list(self._commands)

    def generate_reference_card(self) -> str:
        """Commands grouped by category, in first-seen category order."""
        categories: dict[str, list[CommandSpec]] = {}
        for spec in self._commands:
            categories.setdefault(spec.category, []).append(spec)

        lines: list[str] = []
        for category, specs in categories.items():
            lines.append(f"{category.replace('_', ' ').upper()}:")
            for spec in specs:
                if spec.description:
                    lines.append(f"  {spec.syntax:<28} {spec.description}")
                else:
                    lines.append(f"  {spec.syntax}")
            lines.append("")
        return "\n".join(lines).rstrip("\n")
