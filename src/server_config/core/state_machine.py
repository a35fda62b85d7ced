"""Stage tracking for the staged server config builder."""

from __future__ import annotations

from enum import Enum, auto

from .errors import BuilderStateError


class BuilderStage(Enum):
    START = auto()
    ADDRESS_SET = auto()
    READY = auto()
    BUILT = auto()


class BuilderEvent(Enum):
    CONNECT = auto()
    SET_PORT = auto()
    SET_OPTION = auto()
    BUILD = auto()


_TRANSITIONS = {
    BuilderStage.START: {
        BuilderEvent.CONNECT: BuilderStage.ADDRESS_SET,
    },
    BuilderStage.ADDRESS_SET: {
        BuilderEvent.SET_PORT: BuilderStage.READY,
    },
    BuilderStage.READY: {
        BuilderEvent.SET_OPTION: BuilderStage.READY,
        BuilderEvent.BUILD: BuilderStage.BUILT,
    },
    # terminal
    BuilderStage.BUILT: {},
}


class BuilderStateMachine:
    def __init__(self):
        self.state = BuilderStage.START

    def check(self, event: BuilderEvent, step: str) -> None:
        """Raise BuilderStateError unless ``event`` is allowed in the current stage."""
        if event not in _TRANSITIONS.get(self.state, {}):
            raise BuilderStateError(self.state, step)

    def transition(self, event: BuilderEvent, step: str) -> BuilderStage:
        self.check(event, step)
        self.state = _TRANSITIONS[self.state][event]
        return self.state
