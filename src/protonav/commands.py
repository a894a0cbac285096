"""REPL command dispatcher — routes command lines to an Environment.

Each command line is tokenized with shell quoting rules, routed on its
first word and answered with a formatted result. Navigation errors become
``!`` lines; the environment itself is never left half-updated.
"""

from __future__ import annotations

import logging
import shlex

from protonav.entity import parse_header
from protonav.env import Environment
from protonav.errors import (
    EnvError,
    UnknownPackageError,
    UnknownServiceError,
)
from protonav.formatter import format_names, format_result, suggest
from protonav.registry import CommandRegistry, CommandSpec

logger = logging.getLogger(__name__)

COMMANDS: list[CommandSpec] = [
    CommandSpec("package", "package NAME", "navigation", "select a package"),
    CommandSpec(
        "service",
        "service NAME",
        "navigation",
        "select a service (or PACKAGE.SERVICE)",
    ),
    CommandSpec("address", "address", "navigation", "print the current position"),
    CommandSpec(
        "show",
        "show package|service|message|rpc|header",
        "query",
        "list entities in scope",
    ),
    CommandSpec("header", "header KEY=VALUE ...", "headers", "set request headers"),
    CommandSpec("header", "header -r KEY ...", "headers", "remove request headers"),
]

_SHOW_TARGETS = ("package", "service", "message", "rpc", "header")


def default_registry() -> CommandRegistry:
    registry = CommandRegistry()
    registry.register_many(COMMANDS)
    return registry


class CommandDispatcher:
    """Routes REPL command lines to :class:`Environment` operations."""

    def __init__(self, env: Environment, registry: CommandRegistry | None = None) -> None:
        self._env = env
        self._registry = registry or default_registry()

    @property
    def env(self) -> Environment:
        return self._env

    @property
    def registry(self) -> CommandRegistry:
        return self._registry

    def prompt(self) -> str:
        """Prompt text reflecting the current address."""
        address = self._env.address()
        return f"{address}> " if address else "> "

    def dispatch(self, line: str) -> str:
        """Run one command line and return its formatted result."""
        parts = _tokenize(line)
        if not parts:
            return ""
        command = parts[0].lower()
        args = parts[1:]

        try:
            match command:
                case "package":
                    return self._handle_package(args)
                case "service":
                    return self._handle_service(args)
                case "address":
                    return self._env.address() or format_result(True, "(no selection)")
                case "show":
                    return self._handle_show(args)
                case "header":
                    return self._handle_header(args)
                case _:
                    return _unknown("command", command, self._registry.names)
        except EnvError as exc:
            logger.debug("Command %r failed: %s", line, exc)
            return format_result(False, str(exc))

    def _handle_package(self, args: list[str]) -> str:
        if len(args) != 1:
            return format_result(False, "usage: package NAME")
        name = args[0]
        try:
            self._env.select_package(name)
        except UnknownPackageError:
            return _unknown("package", name, (p.name for p in self._env.packages()))
        return format_result(True, f"Using package '{name}'")

    def _handle_service(self, args: list[str]) -> str:
        if len(args) != 1:
            return format_result(False, "usage: service NAME")
        name = args[0]
        try:
            self._env.select_service(name)
        except UnknownServiceError:
            return _unknown("service", name, (s.name for s in self._env.services()))
        return format_result(True, f"Using service '{name}'")

    def _handle_show(self, args: list[str]) -> str:
        if len(args) != 1:
            return format_result(False, f"usage: show {'|'.join(_SHOW_TARGETS)}")
        # Plural forms are accepted, e.g. "show services".
        target = args[0].lower().removesuffix("s")
        match target:
            case "package":
                return format_names(p.name for p in self._env.packages())
            case "service":
                return format_names(s.name for s in self._env.services())
            case "message":
                return format_names(m.name for m in self._env.messages())
            case "rpc":
                return format_names(r.name for r in self._env.rpcs())
            case "header":
                return format_names(f"{h.key}={h.value}" for h in self._env.headers())
            case _:
                return _unknown("show target", args[0], _SHOW_TARGETS)

    def _handle_header(self, args: list[str]) -> str:
        if not args:
            return format_result(False, "usage: header KEY=VALUE ... | header -r KEY ...")

        if args[0] in ("-r", "--remove"):
            keys = args[1:]
            if not keys:
                return format_result(False, "Missing header key")
            for key in keys:
                self._env.remove_header(key)
            return format_result(True, f"Removed {len(keys)} header(s)", prefix="-")

        try:
            headers = [parse_header(arg) for arg in args]
        except ValueError as exc:
            return format_result(False, str(exc))
        for header in headers:
            self._env.add_header(header)
        return format_result(True, f"Set {len(headers)} header(s)")


def _unknown(kind: str, name: str, candidates) -> str:
    message = f"Unknown {kind}: {name!r}"
    hint = suggest(name, candidates)
    if hint is not None:
        message += f" (did you mean {hint!r}?)"
    return format_result(False, message)


def _tokenize(line: str) -> list[str]:
    """Tokenize a command line, respecting quotes."""
    try:
        return shlex.split(line)
    except ValueError:
        return line.split()
