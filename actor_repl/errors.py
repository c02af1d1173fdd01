"""Exception hierarchy for the actor REPL."""

from typing import Any


class ActorReplError(Exception):
    """Base class for all actor REPL errors."""


class ConfigError(ActorReplError):
    pass


class ActorExistsError(ActorReplError, ValueError):
    pass


class CommandParseError(ActorReplError, ValueError):
    """Raised when a raw command string does not match the command grammar."""

    def __init__(self, message: str, raw: str):
        super().__init__(message)
        self.raw = raw


class MailboxClosed(ActorReplError):
    """The other side of a mailbox is gone."""

    def __init__(self, message: str, undelivered: Any = None):
        super().__init__(message)
        self.undelivered = undelivered


class SendError(MailboxClosed):
    """Sending failed because the receiving actor closed its mailbox."""


class RecvError(MailboxClosed):
    """Receiving failed because every sending handle was closed."""
