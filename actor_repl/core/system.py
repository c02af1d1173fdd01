"""ActorSystem - manages actor lifecycle and message routing."""

import uuid
from typing import Dict, List, Optional, Type
from .actor import Actor, ActorContext
from .actor_ref import ActorRef, ActorPath
from .logging import get_logger
from ..errors import ActorExistsError


logger = get_logger(__name__)


class ActorSystem:
    """Manages actor lifecycle and message routing."""

    def __init__(self, node_id: str = "default"):
        """
        Initialize actor system.

        Args:
            node_id: Identifier for this system, used in actor paths
        """
        self._node_id = node_id
        self._actors: Dict[ActorPath, Actor] = {}
        self._running = False

    @property
    def node_id(self) -> str:
        """Get node ID."""
        return self._node_id

    @property
    def running(self) -> bool:
        return self._running

    @property
    def actors(self) -> List[ActorPath]:
        """Paths of the actors currently registered."""
        return list(self._actors)

    async def spawn(
        self,
        actor_class: Type[Actor],
        actor_id: Optional[str] = None,
        **kwargs
    ) -> ActorRef:
        """
        Spawn a new actor.

        Args:
            actor_class: Actor class to spawn
            actor_id: Unique identifier (auto-generated if None)
            **kwargs: Arguments to pass to actor constructor

        Returns:
            A new sending handle to the spawned actor, owned by the caller

        Raises:
            ActorExistsError: If an actor with this ID is still registered
        """
        if actor_id is None:
            actor_id = f"{actor_class.__name__}-{uuid.uuid4().hex[:8]}"

        path = ActorPath(node_id=self._node_id, actor_id=actor_id)

        existing = self._actors.get(path)
        if existing is not None:
            if not existing.done:
                raise ActorExistsError(f"Actor with ID {actor_id} already exists")
            self._forget(path)

        actor = actor_class(**kwargs)

        context = ActorContext(actor, path, self)
        actor.context = context

        self._actors[path] = actor

        actor_ref = context.new_ref()

        actor.pre_start()
        actor.start()
        logger.debug("spawned %s", path)

        return actor_ref

    async def stop(self, actor_ref: ActorRef) -> None:
        """
        Stop an actor.

        Args:
            actor_ref: Reference to actor to stop
        """
        actor = self.get_actor(actor_ref.path)
        if actor is None:
            return

        await actor.stop()
        self._forget(actor_ref.path)

    async def join(self, actor_ref: ActorRef) -> None:
        """
        Wait until an actor terminates on its own.

        Args:
            actor_ref: Reference to actor to wait for
        """
        actor = self.get_actor(actor_ref.path)
        if actor is None:
            return
        await actor.join()
        logger.debug("joined %s", actor_ref.path)

    def get_actor(self, path: ActorPath) -> Optional[Actor]:
        """Get the actor instance registered under path."""
        return self._actors.get(path)

    def _forget(self, path: ActorPath) -> None:
        del self._actors[path]

    async def shutdown(self) -> None:
        """Stop every actor that is still registered."""
        self._running = False

        for path in list(self._actors.keys()):
            actor = self._actors.get(path)
            if actor is None:
                continue
            await actor.stop()
            self._forget(path)
        logger.debug("actor system %s shut down", self._node_id)

    async def start(self) -> None:
        """Start the actor system."""
        self._running = True
        logger.debug("actor system %s started", self._node_id)
