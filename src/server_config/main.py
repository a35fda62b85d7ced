#!/usr/bin/env python3
"""server_config: build a sample server configuration and print it"""

import logging

from .config import config
from .core.builder import connect_to
from .core.config_model import ServerConfig

logger = logging.getLogger(__name__)


def build_sample_config() -> ServerConfig:
    """Representative configuration used by the command-line driver."""
    return (
        connect_to("127.0.0.1")
        .at_port(8080)
        .with_encryption()
        .with_max_connections(500)
        .with_logging()
        .build()
    )


def main():
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Invalid settings propagate and end the process with a traceback
    server_config = build_sample_config()
    logger.debug("Built %r", server_config)

    print("Server started with configuration:")
    print(server_config)


if __name__ == "__main__":
    main()
