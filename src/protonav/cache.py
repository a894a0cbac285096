"""Per-package memoization of selected packages."""

from __future__ import annotations

import logging

from protonav.entity import Package

logger = logging.getLogger(__name__)


class SelectionCache:
    """Unbounded map of package name to :class:`Package`.

    Populated only when a package is selected; entries are never evicted.
    """

    def __init__(self) -> None:
        self._packages: dict[str, Package] = {}

    def store(self, package: Package) -> None:
        """Cache *package*, overwriting any earlier entry with the same name."""
        self._packages[package.name] = package
        logger.debug("Cached package %r", package.name)

    def get(self, name: str) -> Package:
        """Return the cached package. Raises :class:`KeyError` if never selected."""
        return self._packages[name]

    def __contains__(self, name: object) -> bool:
        return name in self._packages

    def __len__(self) -> int:
        return len(self._packages)

    @property
    def names(self) -> list[str]:
        """Cached package names in selection order."""
        return list(self._packages)
