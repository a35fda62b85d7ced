"""server_config - Immutable server configuration built through a staged fluent builder"""

__version__ = "1.0.0"
__description__ = "Immutable server configuration built through a staged fluent builder"

__all__ = [
    "connect_to",
    "ServerConfig",
    "InvalidArgumentError",
    "OutOfRangeError",
    "BuilderStateError",
    "load_server_config",
    "__version__",
]


def __getattr__(name: str):
    """Lazy import so that ``import server_config`` does not read .env.

    python-dotenv is loaded only by the modules that read process settings:
    server_config.config, imported by server_config.main and by
    load_server_config.
    """
    if name == "ServerConfig":
        from .core.config_model import ServerConfig

        return ServerConfig
    if name == "connect_to":
        from .core.builder import connect_to

        return connect_to
    if name in ("InvalidArgumentError", "OutOfRangeError", "BuilderStateError"):
        from .core import errors

        return getattr(errors, name)
    if name == "load_server_config":
        from .adapters.config_env import load_server_config

        return load_server_config
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
