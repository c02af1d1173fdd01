"""Messaging components for the actor REPL."""

from .message import (
    DoWork,
    MainMessage,
    MainQuit,
    Message,
    UserInput,
    WorkerMessage,
    WorkerQuit,
    WorkResult,
)

__all__ = [
    "DoWork",
    "MainMessage",
    "MainQuit",
    "Message",
    "UserInput",
    "WorkerMessage",
    "WorkerQuit",
    "WorkResult",
]
