"""Process settings for server_config"""
import logging
import os

from dotenv import load_dotenv

load_dotenv()


def resolve_log_level(name: str) -> str:
    """Return ``name`` upper-cased if logging knows it, INFO otherwise."""
    level = name.strip().upper()
    if isinstance(logging.getLevelName(level), int):
        return level
    return "INFO"


class Config:
    """Minimal configuration"""

    DEBUG = os.getenv("DEBUG", "false").lower() == "true"

    # Falls back to DEBUG when DEBUG=true, INFO otherwise
    LOG_LEVEL = resolve_log_level(os.getenv("LOG_LEVEL", "DEBUG" if DEBUG else "INFO"))


config = Config()
