"""Errors raised while building a server configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .state_machine import BuilderStage


class InvalidArgumentError(ValueError):
    """A builder step received an unusable argument."""

    def __init__(self, param_name: str, message: str):
        super().__init__(f"{message} (parameter '{param_name}')")
        self.param_name = param_name


class OutOfRangeError(InvalidArgumentError):
    """A numeric argument fell outside its allowed range."""

    def __init__(self, param_name: str, value, message: str):
        super().__init__(param_name, f"{message} Got {value!r}.")
        self.value = value


class BuilderStateError(RuntimeError):
    """A builder step was called in the wrong stage."""

    def __init__(self, stage: BuilderStage, step: str):
        super().__init__(f"Cannot call {step}() while builder is in stage {stage.name}")
        self.stage = stage
        self.step = step
