import dataclasses

import pytest

from server_config.core.builder import connect_to
from server_config.core.config_model import ServerConfig
from server_config.core.errors import InvalidArgumentError, OutOfRangeError


def _sample():
    return connect_to("127.0.0.1").at_port(8080).with_timeout(15).build()


@pytest.mark.parametrize(
    "field, value",
    [
        ("address", "10.0.0.1"),
        ("port", 90),
        ("use_encryption", True),
        ("max_connections", 1),
        ("timeout_seconds", 0),
        ("logging_enabled", True),
    ],
)
def test_fields_cannot_be_reassigned(field, value):
    config = _sample()

    with pytest.raises(dataclasses.FrozenInstanceError):
        setattr(config, field, value)


def test_fields_cannot_be_deleted():
    config = _sample()

    with pytest.raises(dataclasses.FrozenInstanceError):
        del config.port


def test_new_attributes_cannot_be_added():
    config = _sample()

    with pytest.raises(dataclasses.FrozenInstanceError):
        config.extra = "value"


def test_equal_configs_hash_equal():
    assert _sample() == _sample()
    assert hash(_sample()) == hash(_sample())
    assert len({_sample(), _sample()}) == 1


def test_str_with_defaults():
    config = connect_to("localhost").at_port(443).build()

    assert str(config) == (
        "ServerConfig [Address=localhost, Port=443, Encryption=False, "
        "MaxConnections=100, Timeout=30s, Logging=False]"
    )


def test_repr_is_dataclass_repr():
    config = _sample()

    assert repr(config).startswith("ServerConfig(address='127.0.0.1', port=8080")


def test_direct_construction_with_valid_values():
    config = ServerConfig(address="10.0.0.5", port=9090, use_encryption=True)

    assert config == ServerConfig.connect_to("10.0.0.5").at_port(9090).with_encryption().build()


@pytest.mark.parametrize(
    "kwargs, error, param_name",
    [
        ({"address": "", "port": 8080}, InvalidArgumentError, "address"),
        ({"address": "   ", "port": 8080}, InvalidArgumentError, "address"),
        ({"address": 10, "port": 8080}, InvalidArgumentError, "address"),
        ({"address": "h", "port": 0}, OutOfRangeError, "port"),
        ({"address": "h", "port": 70000}, OutOfRangeError, "port"),
        ({"address": "h", "port": "80"}, InvalidArgumentError, "port"),
        ({"address": "h", "port": 80, "max_connections": -1}, OutOfRangeError, "max_connections"),
        ({"address": "h", "port": 80, "max_connections": 0}, OutOfRangeError, "max_connections"),
        ({"address": "h", "port": 80, "timeout_seconds": -5}, OutOfRangeError, "seconds"),
        ({"address": "h", "port": 80, "use_encryption": "yes"}, InvalidArgumentError, "use_encryption"),
        ({"address": "h", "port": 80, "logging_enabled": 1}, InvalidArgumentError, "logging_enabled"),
    ],
)
def test_direct_construction_enforces_field_rules(kwargs, error, param_name):
    with pytest.raises(error) as exc_info:
        ServerConfig(**kwargs)

    assert exc_info.value.param_name == param_name
