"""Stage interfaces for the server config builder.

Each stage only exposes the calls that are legal in it, so a type checker
following the return annotations sees ``build()`` only after ``at_port()``.
The builder also enforces the same order at runtime.
"""

from __future__ import annotations

from typing import Protocol, TYPE_CHECKING, runtime_checkable

if TYPE_CHECKING:
    from .config_model import ServerConfig


@runtime_checkable
class AddressStep(Protocol):
    """Address supplied; the port is still required."""

    def at_port(self, port: int) -> "OptionalSteps":
        """Set the listening port (1-65535)."""


@runtime_checkable
class OptionalSteps(Protocol):
    """Mandatory fields supplied; optional settings may follow in any order."""

    def with_encryption(self) -> "OptionalSteps":
        """Enable encryption."""

    def with_max_connections(self, max_connections: int) -> "OptionalSteps":
        """Set the connection limit (must be positive)."""

    def with_timeout(self, seconds: int) -> "OptionalSteps":
        """Set the timeout in seconds (must not be negative)."""

    def with_logging(self) -> "OptionalSteps":
        """Enable logging."""

    def build(self) -> "ServerConfig":
        """Produce the immutable configuration."""
