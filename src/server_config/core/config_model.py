"""Core configuration model (immutable server settings)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .errors import InvalidArgumentError, OutOfRangeError

if TYPE_CHECKING:
    from .ports import AddressStep

MIN_PORT = 1
MAX_PORT = 65535
DEFAULT_MAX_CONNECTIONS = 100
DEFAULT_TIMEOUT_SECONDS = 30


def _require_int(param_name: str, value) -> int:
    # bool is an int subclass but never a valid count or port
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(param_name, f"Expected an integer, got {type(value).__name__}.")
    return value


def _require_bool(param_name: str, value) -> bool:
    if not isinstance(value, bool):
        raise InvalidArgumentError(param_name, f"Expected a bool, got {type(value).__name__}.")
    return value


def validate_address(address) -> str:
    if not isinstance(address, str):
        raise InvalidArgumentError(
            "address", f"Address must be a string, got {type(address).__name__}."
        )
    if not address.strip():
        raise InvalidArgumentError("address", "Address cannot be empty.")
    return address


def validate_port(port) -> int:
    _require_int("port", port)
    if port < MIN_PORT or port > MAX_PORT:
        raise OutOfRangeError("port", port, f"Port must be between {MIN_PORT} and {MAX_PORT}.")
    return port


def validate_max_connections(max_connections) -> int:
    _require_int("max_connections", max_connections)
    if max_connections <= 0:
        raise OutOfRangeError("max_connections", max_connections, "Max connections must be positive.")
    return max_connections


def validate_timeout(seconds) -> int:
    _require_int("seconds", seconds)
    if seconds < 0:
        raise OutOfRangeError("seconds", seconds, "Timeout cannot be negative.")
    return seconds


@dataclass(frozen=True)
class ServerConfig:
    """Immutable server configuration.

    Instances are normally produced by the staged builder returned from
    :meth:`connect_to`; every field is fixed once the object exists. Direct
    construction runs the same checks as the builder steps.
    """

    address: str
    port: int
    use_encryption: bool = False
    max_connections: int = DEFAULT_MAX_CONNECTIONS
    timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS
    logging_enabled: bool = False

    def __post_init__(self):
        validate_address(self.address)
        validate_port(self.port)
        _require_bool("use_encryption", self.use_encryption)
        validate_max_connections(self.max_connections)
        validate_timeout(self.timeout_seconds)
        _require_bool("logging_enabled", self.logging_enabled)

    @staticmethod
    def connect_to(address: str) -> AddressStep:
        """Entry point for the fluent builder."""
        from .builder import connect_to

        return connect_to(address)

    def __str__(self) -> str:
        return (
            f"ServerConfig [Address={self.address}, Port={self.port}, "
            f"Encryption={self.use_encryption}, MaxConnections={self.max_connections}, "
            f"Timeout={self.timeout_seconds}s, Logging={self.logging_enabled}]"
        )
