"""Core actor system components."""

from .actor import Actor, ActorContext, SourceActor
from .actor_ref import ActorPath, ActorRef
from .mailbox import Mailbox
from .system import ActorSystem

__all__ = [
    "Actor",
    "ActorContext",
    "ActorPath",
    "ActorRef",
    "ActorSystem",
    "Mailbox",
    "SourceActor",
]
