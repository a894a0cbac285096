"""protonav — navigation and selection state for interactive protocol clients."""

from protonav.cache import SelectionCache
from protonav.commands import COMMANDS, CommandDispatcher
from protonav.config import EnvConfig, build_environment, load_config
from protonav.entity import (
    RPC,
    Header,
    Message,
    MessageSpec,
    Package,
    RPCSpec,
    Service,
    ServiceSpec,
    parse_header,
)
from protonav.env import DEFAULT_PACKAGE, Environment, SelectionState
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
from protonav.formatter import format_names, format_result, suggest
from protonav.headers import HeaderStore
from protonav.registry import CommandRegistry, CommandSpec
from protonav.server import create_server

__all__ = [
    # Entities
    "Package",
    "Service",
    "Message",
    "RPC",
    "ServiceSpec",
    "MessageSpec",
    "RPCSpec",
    "Header",
    "parse_header",
    # Errors
    "EnvError",
    "PackageUnselectedError",
    "ServiceUnselectedError",
    "UnknownPackageError",
    "UnknownServiceError",
    "InvalidServiceNameError",
    "InvalidMessageNameError",
    "InvalidRPCNameError",
    # State
    "HeaderStore",
    "SelectionCache",
    "SelectionState",
    "Environment",
    "DEFAULT_PACKAGE",
    # Config
    "EnvConfig",
    "load_config",
    "build_environment",
    # Commands
    "CommandSpec",
    "CommandRegistry",
    "CommandDispatcher",
    "COMMANDS",
    # Formatter
    "format_result",
    "format_names",
    "suggest",
    # Server
    "create_server",
]
