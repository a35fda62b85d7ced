"""Env configuration adapter producing a ServerConfig through the staged builder."""

from __future__ import annotations

import logging
import os
from typing import Mapping

from .. import config as _settings  # noqa: F401  (loads .env into os.environ)
from ..core.builder import connect_to
from ..core.config_model import ServerConfig
from ..core.errors import InvalidArgumentError

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"true", "1", "yes", "on"}
_FALSE_VALUES = {"false", "0", "no", "off"}


def _required(environ: Mapping[str, str], name: str) -> str:
    value = environ.get(name)
    if value is None:
        raise InvalidArgumentError(name, f"Environment variable {name} is not set.")
    return value


def _as_int(name: str, raw: str) -> int:
    try:
        return int(raw.strip())
    except ValueError:
        raise InvalidArgumentError(name, f"Expected an integer, got {raw!r}.") from None


def _as_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise InvalidArgumentError(
        name, f"Expected one of true/false, 1/0, yes/no, on/off, got {raw!r}."
    )


def load_server_config(environ: Mapping[str, str] | None = None) -> ServerConfig:
    """Build a ServerConfig from SERVER_* environment variables.

    SERVER_ADDRESS and SERVER_PORT are required. SERVER_ENCRYPTION,
    SERVER_MAX_CONNECTIONS, SERVER_TIMEOUT and SERVER_LOGGING are optional;
    unset or empty ones keep the builder defaults. Unrecognized flag values
    raise InvalidArgumentError. Range checks are left to the builder.
    """
    if environ is None:
        environ = os.environ

    address = _required(environ, "SERVER_ADDRESS")
    port = _as_int("SERVER_PORT", _required(environ, "SERVER_PORT"))
    builder = connect_to(address).at_port(port)

    encryption = environ.get("SERVER_ENCRYPTION", "")
    if encryption and _as_bool("SERVER_ENCRYPTION", encryption):
        builder = builder.with_encryption()
    else:
        logger.debug("SERVER_ENCRYPTION not enabled, keeping default")

    max_connections = environ.get("SERVER_MAX_CONNECTIONS", "")
    if max_connections:
        builder = builder.with_max_connections(_as_int("SERVER_MAX_CONNECTIONS", max_connections))
    else:
        logger.debug("SERVER_MAX_CONNECTIONS not set, keeping default")

    timeout = environ.get("SERVER_TIMEOUT", "")
    if timeout:
        builder = builder.with_timeout(_as_int("SERVER_TIMEOUT", timeout))
    else:
        logger.debug("SERVER_TIMEOUT not set, keeping default")

    logging_flag = environ.get("SERVER_LOGGING", "")
    if logging_flag and _as_bool("SERVER_LOGGING", logging_flag):
        builder = builder.with_logging()
    else:
        logger.debug("SERVER_LOGGING not enabled, keeping default")

    server_config = builder.build()
    logger.info("Loaded server configuration from environment: %s", server_config)
    return server_config
