"""Messages exchanged between the REPL actors."""

from abc import ABC
from typing import Union
from dataclasses import dataclass


class Message(ABC):
    """Base class for all messages."""
    pass


# Messages for the worker.

@dataclass(frozen=True)
class DoWork(Message):
    """A raw command string to parse and execute."""
    text: str


@dataclass(frozen=True)
class WorkerQuit(Message):
    """Tells the worker to leave its loop."""


# Messages for the coordinator.

@dataclass(frozen=True)
class WorkResult(Message):
    """Human-readable outcome of one unit of work."""
    text: str


@dataclass(frozen=True)
class UserInput(Message):
    """A line typed by the user, to be forwarded to the worker."""
    text: str


@dataclass(frozen=True)
class MainQuit(Message):
    """Asks the coordinator to shut down."""


WorkerMessage = Union[DoWork, WorkerQuit]
MainMessage = Union[WorkResult, UserInput, MainQuit]
