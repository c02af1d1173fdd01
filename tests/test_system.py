"""Tests for the ActorSystem."""

import pytest
import asyncio
from actor_repl.core.actor import Actor
from actor_repl.core.actor_ref import ActorPath
from actor_repl.core.system import ActorSystem
from actor_repl.errors import ActorExistsError


class CounterActor(Actor):
    """Actor that maintains a counter."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.count = 0

    async def receive(self, message):
        """Handle counter messages."""
        if message == "increment":
            self.count += 1
        elif message == "done":
            self.halt()


@pytest.mark.asyncio
async def test_system_spawn():
    """Test spawning actors."""
    system = ActorSystem(node_id="test-node")
    await system.start()

    actor_ref = await system.spawn(CounterActor, actor_id="counter")

    assert actor_ref.path.actor_id == "counter"
    assert actor_ref.path.node_id == "test-node"
    assert actor_ref.path in system.actors

    await system.shutdown()


@pytest.mark.asyncio
async def test_system_spawn_generates_id():
    system = ActorSystem(node_id="test-node")
    await system.start()

    actor_ref = await system.spawn(CounterActor)

    assert actor_ref.path.actor_id.startswith("CounterActor-")

    await system.shutdown()


@pytest.mark.asyncio
async def test_system_spawn_duplicate_id():
    """Test that spawning with duplicate ID raises error."""
    system = ActorSystem(node_id="test-node")
    await system.start()

    await system.spawn(CounterActor, actor_id="counter")

    with pytest.raises(ActorExistsError, match="already exists"):
        await system.spawn(CounterActor, actor_id="counter")

    await system.shutdown()


@pytest.mark.asyncio
async def test_system_respawn_after_termination():
    """Test that an ID can be reused once its actor has terminated."""
    system = ActorSystem(node_id="test-node")
    await system.start()

    first = await system.spawn(CounterActor, actor_id="counter")
    await first.tell("done")
    await asyncio.wait_for(system.join(first), timeout=1.0)

    second = await system.spawn(CounterActor, actor_id="counter")
    assert system.get_actor(second.path) is not None

    await system.shutdown()


@pytest.mark.asyncio
async def test_system_join_waits_for_termination():
    system = ActorSystem(node_id="test-node")
    await system.start()

    actor_ref = await system.spawn(CounterActor, actor_id="counter")
    joiner = asyncio.create_task(system.join(actor_ref))
    await asyncio.sleep(0.01)
    assert not joiner.done()

    await actor_ref.tell("done")
    await asyncio.wait_for(joiner, timeout=1.0)
    assert system.get_actor(actor_ref.path).done

    await system.shutdown()


@pytest.mark.asyncio
async def test_system_multiple_actors():
    """Test multiple actors in system."""
    system = ActorSystem(node_id="test-node")
    await system.start()

    actor1 = await system.spawn(CounterActor, actor_id="counter1")
    actor2 = await system.spawn(CounterActor, actor_id="counter2")

    await actor1.tell("increment")
    await actor2.tell("increment")
    await actor2.tell("increment")

    await asyncio.sleep(0.1)

    assert system.get_actor(actor1.path).count == 1
    assert system.get_actor(actor2.path).count == 2

    await system.shutdown()


@pytest.mark.asyncio
async def test_system_stop_and_shutdown():
    system = ActorSystem(node_id="test-node")
    await system.start()
    assert system.running

    actor1 = await system.spawn(CounterActor, actor_id="counter1")
    await system.spawn(CounterActor, actor_id="counter2")

    await system.stop(actor1)
    assert actor1.path not in system.actors
    assert len(system.actors) == 1

    await system.shutdown()
    assert system.actors == []
    assert not system.running


@pytest.mark.asyncio
async def test_system_get_actor_unknown_path():
    system = ActorSystem(node_id="test-node")
    await system.start()

    assert system.get_actor(ActorPath("test-node", "ghost")) is None

    await system.shutdown()
