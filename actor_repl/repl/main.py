"""Wires the coordinator, worker and input actors into a running REPL."""

from typing import Optional, TextIO

from actor_repl.core.system import ActorSystem
from actor_repl.config import ReplConfig
from actor_repl.core.logging import get_logger
from .coordinator import CoordinatorActor
from .input import InputFn


logger = get_logger(__name__)


async def run_repl(
    config: Optional[ReplConfig] = None,
    input_fn: Optional[InputFn] = None,
    output: Optional[TextIO] = None,
) -> None:
    """
    Run the REPL until it shuts down.

    Returns once the coordinator has stopped and the worker's termination
    has been observed; anything still running (an input actor blocked on a
    read) is stopped on the way out.

    Args:
        config: Settings (from the environment if None)
        input_fn: Source of input lines (stdin if None)
        output: Stream for results (stdout if None)
    """
    config = (config or ReplConfig.from_env()).validate()
    logger.info("main starting up")

    system = ActorSystem(node_id="repl")
    await system.start()
    try:
        coordinator = await system.spawn(
            CoordinatorActor,
            "coordinator",
            input_fn=input_fn,
            output=output,
            startup_delay=config.startup_delay,
            quit_on_eof=config.quit_on_eof,
            mailbox_size=config.mailbox_capacity,
        )
        # only the coordinator's peers send to it
        coordinator.close()
        await system.join(coordinator)
    finally:
        await system.shutdown()

    logger.info("main is exiting")
    logger.info("goodbye!")
