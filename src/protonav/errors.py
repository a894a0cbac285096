"""Error taxonomy for navigation and lookup failures.

Every error carries the offending name so REPL output stays diagnosable.
None of these are transient; callers report them and move on.
"""

from __future__ import annotations


class EnvError(Exception):
    """Base class for all navigation errors."""

    reason = "environment error"

    def __init__(self, name: str = "", detail: str = "") -> None:
        self.name = name
        self.detail = detail
        super().__init__(self._format())

    def _format(self) -> str:
        if self.detail and self.name:
            return f"{self.reason}: {self.name}: {self.detail}"
        if self.detail:
            return f"{self.reason}: {self.detail}"
        if self.name:
            return f"{self.reason}: {self.name} not found"
        return self.reason


# Precondition violations


class PackageUnselectedError(EnvError):
    reason = "package unselected"


class ServiceUnselectedError(EnvError):
    reason = "service unselected"


# Selection-time lookups


class UnknownPackageError(EnvError):
    reason = "unknown package"


class UnknownServiceError(EnvError):
    reason = "unknown service"


# Find-by-name lookups within an already selected scope


class InvalidServiceNameError(EnvError):
    reason = "invalid service name"


class InvalidMessageNameError(EnvError):
    reason = "invalid message name"


class InvalidRPCNameError(EnvError):
    reason = "invalid RPC name"
