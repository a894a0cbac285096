"""Navigation environment — package → service → RPC selection state.

The :class:`Environment` is the single object a REPL front-end talks to.
It owns the current selection, a cache of selected packages and the header
store, and answers scoped queries against the read-only catalog.

Selection is ordered: a service can only be selected inside a package, and
RPC queries need a selected service. Re-selecting a package does not clear
the selected service name.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import TypeVar

from protonav.cache import SelectionCache
from protonav.entity import RPC, Header, Message, Package, Service
from protonav.errors import (
    EnvError,
    InvalidMessageNameError,
    InvalidRPCNameError,
    InvalidServiceNameError,
    PackageUnselectedError,
    ServiceUnselectedError,
    UnknownPackageError,
    UnknownServiceError,
)
from protonav.headers import HeaderStore

logger = logging.getLogger(__name__)

# Name of the package synthesized for catalogs without packages.
DEFAULT_PACKAGE = "default"

N = TypeVar("N", Package, Service, Message, RPC)


@dataclass
class SelectionState:
    """Current navigation position. Empty strings mean unselected."""

    current_package: str = ""
    current_service: str = ""


def _find(items: Iterable[N], name: str) -> N | None:
    for item in items:
        if item.name == name:
            return item
    return None


class Environment:
    """Selection state, package cache and headers over a fixed catalog."""

    def __init__(
        self,
        packages: Sequence[Package],
        default_headers: Iterable[Header] = (),
    ) -> None:
        self._packages = list(packages)
        self._state = SelectionState()
        self._cache = SelectionCache()
        self._headers = HeaderStore()
        for header in default_headers:
            self.add_header(header)

    @classmethod
    def from_services(
        cls,
        services: Sequence[Service],
        messages: Sequence[Message],
        default_headers: Iterable[Header] = (),
    ) -> Environment:
        """Build an environment for a catalog with no package concept.

        Wraps *services* and *messages* in a single package named
        :data:`DEFAULT_PACKAGE` and selects it.
        """
        package = Package(
            name=DEFAULT_PACKAGE,
            services=list(services),
            messages=list(messages),
        )
        env = cls([package], default_headers)
        try:
            env.select_package(DEFAULT_PACKAGE)
        except EnvError as exc:
            raise RuntimeError(
                f"synthesized package {DEFAULT_PACKAGE!r} is not selectable"
            ) from exc
        return env

    # ------------------------------------------------------------------
    # Selection state
    # ------------------------------------------------------------------

    @property
    def current_package(self) -> str:
        return self._state.current_package

    @property
    def current_service(self) -> str:
        return self._state.current_service

    @property
    def has_current_package(self) -> bool:
        return self._state.current_package != ""

    @property
    def has_current_service(self) -> bool:
        return self._state.current_service != ""

    def select_package(self, name: str) -> None:
        """Make *name* the current package and cache it.

        Raises :class:`UnknownPackageError` and leaves the state untouched
        when no package has that name. The current service is kept.
        """
        package = _find(self._packages, name)
        if package is None:
            raise UnknownPackageError(name)
        self._state.current_package = name
        self._cache.store(package)
        logger.debug("Selected package %r", name)

    def select_service(self, name: str) -> None:
        """Make *name* the current service.

        With no package selected, *name* must look like ``package.service``;
        the prefix before the first ``.`` is selected as the package. The
        service lookup always uses the full *name* as given.
        """
        if not self.has_current_package:
            package_name, sep, _ = name.partition(".")
            if not sep:
                raise PackageUnselectedError(
                    name,
                    "please select a package first (package_name.service_name)",
                )
            try:
                self.select_package(package_name)
            except EnvError as exc:
                raise type(exc)(name, f"{exc.name} not found") from exc

        if _find(self.services(), name) is None:
            raise UnknownServiceError(name)
        self._state.current_service = name
        logger.debug("Selected service %r", name)

    def address(self) -> str:
        """Dotted ``package[.service]`` summary of the current position."""
        if not self.has_current_package:
            return ""
        if self.has_current_service:
            return f"{self._state.current_package}.{self._state.current_service}"
        return self._state.current_package

    # ------------------------------------------------------------------
    # Scoped queries
    # ------------------------------------------------------------------

    def packages(self) -> list[Package]:
        """All catalog packages in catalog order."""
        return self._packages

    def services(self) -> list[Service]:
        """Services of the current package."""
        if not self.has_current_package:
            raise PackageUnselectedError()
        return self._cache.get(self._state.current_package).services

    def messages(self) -> list[Message]:
        """Messages of the current package."""
        if not self.has_current_package:
            raise PackageUnselectedError()
        return self._cache.get(self._state.current_package).messages

    def rpcs(self) -> Sequence[RPC]:
        """RPCs of the current service."""
        if not self.has_current_service:
            raise ServiceUnselectedError()
        return self.service(self._state.current_service).rpcs

    def service(self, name: str) -> Service:
        """First service in the current package named *name*."""
        found = _find(self.services(), name)
        if found is None:
            raise InvalidServiceNameError(name)
        return found

    def message(self, name: str) -> Message:
        """First message in the current package named *name*."""
        found = _find(self.messages(), name)
        if found is None:
            raise InvalidMessageNameError(name)
        return found

    def rpc(self, name: str) -> RPC:
        """First RPC in the current service named *name*."""
        found = _find(self.rpcs(), name)
        if found is None:
            raise InvalidRPCNameError(name)
        return found

    # ------------------------------------------------------------------
    # Headers
    # ------------------------------------------------------------------

    def headers(self) -> list[Header]:
        """Copies of all headers, sorted by key."""
        return self._headers.list()

    def add_header(self, header: Header) -> None:
        self._headers.add(header)

    def remove_header(self, key: str) -> None:
        self._headers.remove(key)
