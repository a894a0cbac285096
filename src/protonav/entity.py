"""Catalog entities — packages, services, messages, RPCs and headers.

The catalog is supplied by an external loader and never mutated here.
``Service``, ``Message`` and ``RPC`` are structural protocols so any loader's
objects can be navigated; the ``*Spec`` dataclasses are plain implementations.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable


@runtime_checkable
class RPC(Protocol):
    """A remote procedure call, opaque beyond its name."""

    @property
    def name(self) -> str: ...


@runtime_checkable
class Message(Protocol):
    """A message type, opaque beyond its name."""

    @property
    def name(self) -> str: ...


@runtime_checkable
class Service(Protocol):
    """A service exposing its name and ordered RPCs."""

    @property
    def name(self) -> str: ...

    @property
    def rpcs(self) -> Sequence[RPC]: ...


@dataclass(frozen=True)
class RPCSpec:
    name: str


@dataclass(frozen=True)
class MessageSpec:
    name: str


@dataclass(frozen=True)
class ServiceSpec:
    name: str
    rpcs: tuple[RPCSpec, ...] = ()


@dataclass
class Package:
    """A named package owning ordered services and messages."""

    name: str
    services: list[Service] = field(default_factory=list)
    messages: list[Message] = field(default_factory=list)


@dataclass
class Header:
    """A request header sent with outgoing calls."""

    key: str
    value: str


def parse_header(text: str) -> Header:
    """Parse a ``key=value`` token into a :class:`Header`.

    Splits on the first ``=`` so values may contain ``=``.
    Raises :class:`ValueError` when there is no ``=`` or the key is empty.
    """
    key, sep, value = text.partition("=")
    key = key.strip()
    if not sep or not key:
        raise ValueError(f"invalid header {text!r}: expected key=value")
    return Header(key=key, value=value)
