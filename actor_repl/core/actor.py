"""Base Actor class for the actor system."""

import asyncio
from abc import ABC, abstractmethod
from typing import Any, List, Optional, Type, TYPE_CHECKING
from .mailbox import Mailbox
from .actor_ref import ActorRef, ActorPath
from .logging import get_logger
from ..errors import MailboxClosed

if TYPE_CHECKING:
    from .system import ActorSystem


logger = get_logger(__name__)


class Actor(ABC):
    """Base class for all actors."""

    def __init__(self, mailbox_size: int = 1):
        """
        Initialize actor.

        Args:
            mailbox_size: Maximum size of mailbox queue
        """
        self._mailbox = Mailbox(maxsize=mailbox_size)
        self._context: Optional['ActorContext'] = None
        self._running = False
        self._task: Optional[asyncio.Task] = None
        self._owned: List[ActorRef] = []

    @property
    def context(self) -> 'ActorContext':
        """Get actor context."""
        if self._context is None:
            raise RuntimeError("Actor context not set")
        return self._context

    @context.setter
    def context(self, value: 'ActorContext') -> None:
        """Set actor context."""
        self._context = value

    @property
    def mailbox(self) -> Mailbox:
        """Get actor mailbox."""
        return self._mailbox

    @property
    def name(self) -> str:
        """Actor id, for log lines."""
        if self._context is None:
            return self.__class__.__name__
        return self._context.path.actor_id

    @property
    def running(self) -> bool:
        return self._running

    @property
    def done(self) -> bool:
        """Whether the actor task has finished."""
        return self._task is not None and self._task.done()

    def own(self, ref: ActorRef) -> ActorRef:
        """
        Take ownership of a sending handle.

        Owned handles are closed when the actor stops, so that the receiving
        actor sees the disconnect.
        """
        self._owned.append(ref)
        return ref

    def halt(self) -> None:
        """Leave the message loop after the current message."""
        self._running = False

    @abstractmethod
    async def receive(self, message: Any) -> None:
        """
        Default message handler.

        Args:
            message: Received message
        """
        pass

    def on_mailbox_closed(self, error: MailboxClosed) -> None:
        """Called when a send or receive fails because a peer is gone."""
        logger.error("%s encountered a channel error: %s", self.name, error)

    async def run(self) -> None:
        """Message loop: receive until halted or until every sender is gone."""
        while self._running:
            message = await self._mailbox.get()
            await self.receive(message)

    async def _run(self) -> None:
        """Task body: run the actor and release its channels on the way out."""
        self._running = True
        try:
            await self.run()
        except MailboxClosed as e:
            self.on_mailbox_closed(e)
        except asyncio.CancelledError:
            raise
        except Exception:
            logger.exception("%s crashed", self.name)
        finally:
            self._running = False
            self._mailbox.close()
            for ref in self._owned:
                ref.close()
            self._owned.clear()
            self.post_stop()

    def start(self) -> None:
        """Start actor message processing."""
        if self._task is None or self._task.done():
            self._task = asyncio.create_task(self._run(), name=self.name)

    async def join(self) -> None:
        """Wait until the actor has terminated on its own."""
        if self._task is not None:
            await asyncio.wait({self._task})

    async def stop(self) -> None:
        """Stop actor message processing."""
        self._running = False
        if self._task and not self._task.done():
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass

    def pre_start(self) -> None:
        """Called before actor starts processing messages."""
        pass

    def post_stop(self) -> None:
        """Called after actor stops processing messages."""
        pass


class SourceActor(Actor):
    """
    An actor that produces messages instead of receiving them.

    Nothing is ever delivered to a source actor; subclasses implement
    produce(), which runs once and returns when the source is exhausted.
    """

    def __init__(self, mailbox_size: int = 1):
        super().__init__(mailbox_size)

    async def receive(self, message: Any) -> None:
        raise TypeError(f"{self.__class__.__name__} does not accept messages")

    @abstractmethod
    async def produce(self) -> None:
        """Produce messages until the source is exhausted."""
        pass

    async def run(self) -> None:
        await self.produce()


class ActorContext:
    """Context providing actor capabilities."""

    def __init__(self, actor: Actor, path: ActorPath, system: 'ActorSystem'):
        """
        Initialize actor context.

        Args:
            actor: The actor instance
            path: Path of the actor
            system: Actor system
        """
        self._actor = actor
        self._path = path
        self._system = system

    @property
    def path(self) -> ActorPath:
        """Get the actor's path."""
        return self._path

    def new_ref(self) -> ActorRef:
        """Create a new sending handle to this actor, owned by the caller."""
        return ActorRef(self._path, self._actor.mailbox)

    async def spawn(self, actor_class: Type[Actor], actor_id: str, **kwargs) -> ActorRef:
        """
        Spawn a new actor.

        Args:
            actor_class: Actor class to spawn
            actor_id: Unique identifier for the actor
            **kwargs: Arguments to pass to actor constructor

        Returns:
            Reference to spawned actor
        """
        return await self._system.spawn(actor_class, actor_id, **kwargs)

    async def join(self, actor_ref: ActorRef) -> None:
        """
        Wait for an actor to terminate.

        Args:
            actor_ref: Reference to actor to wait for
        """
        await self._system.join(actor_ref)
