"""Actor references: counted sending handles to an actor's mailbox."""

from typing import Any
from dataclasses import dataclass

from .mailbox import Mailbox
from ..errors import SendError


@dataclass(frozen=True)
class ActorPath:
    """Represents the path to an actor."""
    node_id: str
    actor_id: str

    def __str__(self) -> str:
        return f"actor://{self.node_id}/{self.actor_id}"


class ActorRef:
    """
    Sending handle to an actor's mailbox.

    Every ActorRef counts as one open sender on the target mailbox until it
    is closed. clone() hands out another handle for a different owner; the
    receiver sees its mailbox as disconnected only when every handle has
    been closed.
    """

    def __init__(self, path: ActorPath, mailbox: Mailbox):
        """
        Initialize actor reference.

        Args:
            path: Path to the actor
            mailbox: Mailbox of the actor
        """
        self.path = path
        self._mailbox = mailbox
        self._closed = False
        mailbox.attach()

    @property
    def closed(self) -> bool:
        """Whether this handle has been closed."""
        return self._closed

    async def tell(self, message: Any) -> None:
        """
        Send a message, waiting while the target mailbox is full.

        Args:
            message: Message to send

        Raises:
            SendError: If this handle or the target mailbox is closed
        """
        if self._closed:
            raise SendError(f"handle to {self.path} is closed", undelivered=message)
        await self._mailbox.put(message)

    def clone(self) -> "ActorRef":
        """Create another open handle to the same actor."""
        if self._closed:
            raise SendError(f"cannot clone closed handle to {self.path}")
        return ActorRef(self.path, self._mailbox)

    def close(self) -> None:
        """Release this handle. Idempotent."""
        if not self._closed:
            self._closed = True
            self._mailbox.detach()

    def __enter__(self) -> "ActorRef":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def __str__(self) -> str:
        return str(self.path)

    def __repr__(self) -> str:
        state = " closed" if self._closed else ""
        return f"{self.__class__.__name__}({self.path}{state})"
