"""Staged builder for ServerConfig.

Usage:
    config = (
        connect_to("127.0.0.1")
        .at_port(8080)
        .with_encryption()
        .with_max_connections(500)
        .build()
    )

Every argument is validated as soon as it is passed. Calling a step out of
order (e.g. ``build()`` before ``at_port()``) raises BuilderStateError.
"""

from __future__ import annotations

from .config_model import (
    DEFAULT_MAX_CONNECTIONS,
    DEFAULT_TIMEOUT_SECONDS,
    ServerConfig,
    validate_address,
    validate_max_connections,
    validate_port,
    validate_timeout,
)
from .ports import AddressStep, OptionalSteps
from .state_machine import BuilderEvent, BuilderStage, BuilderStateMachine


class ServerConfigBuilder:
    """Mutable accumulator behind the AddressStep / OptionalSteps interfaces."""

    def __init__(self, address: str):
        self._address = validate_address(address)
        self._port: int | None = None
        self._use_encryption = False
        self._max_connections = DEFAULT_MAX_CONNECTIONS
        self._timeout_seconds = DEFAULT_TIMEOUT_SECONDS
        self._logging_enabled = False
        self._stages = BuilderStateMachine()
        self._stages.transition(BuilderEvent.CONNECT, "connect_to")

    @property
    def stage(self) -> BuilderStage:
        return self._stages.state

    def at_port(self, port: int) -> OptionalSteps:
        self._stages.check(BuilderEvent.SET_PORT, "at_port")
        self._port = validate_port(port)
        self._stages.transition(BuilderEvent.SET_PORT, "at_port")
        return self

    def with_encryption(self) -> OptionalSteps:
        self._stages.transition(BuilderEvent.SET_OPTION, "with_encryption")
        self._use_encryption = True
        return self

    def with_max_connections(self, max_connections: int) -> OptionalSteps:
        self._stages.check(BuilderEvent.SET_OPTION, "with_max_connections")
        self._max_connections = validate_max_connections(max_connections)
        return self

    def with_timeout(self, seconds: int) -> OptionalSteps:
        self._stages.check(BuilderEvent.SET_OPTION, "with_timeout")
        self._timeout_seconds = validate_timeout(seconds)
        return self

    def with_logging(self) -> OptionalSteps:
        self._stages.transition(BuilderEvent.SET_OPTION, "with_logging")
        self._logging_enabled = True
        return self

    def build(self) -> ServerConfig:
        self._stages.transition(BuilderEvent.BUILD, "build")
        return ServerConfig(
            address=self._address,
            port=self._port,
            use_encryption=self._use_encryption,
            max_connections=self._max_connections,
            timeout_seconds=self._timeout_seconds,
            logging_enabled=self._logging_enabled,
        )


def connect_to(address: str) -> AddressStep:
    """Start building a ServerConfig for ``address``."""
    return ServerConfigBuilder(address)
