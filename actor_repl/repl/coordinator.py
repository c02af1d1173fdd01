"""Coordinator actor: routes user input to the worker and prints results."""

import asyncio
import sys
from collections import deque
from typing import Awaitable, Deque, Optional, TextIO

from actor_repl.core.actor import Actor
from actor_repl.core.actor_ref import ActorRef
from actor_repl.core.logging import get_logger
from actor_repl.errors import MailboxClosed, SendError
from actor_repl.messaging.message import (
    DoWork,
    MainMessage,
    MainQuit,
    UserInput,
    WorkerQuit,
    WorkResult,
)
from .input import InputActor, InputFn
from .worker import WorkerActor


logger = get_logger(__name__)


class CoordinatorActor(Actor):
    """
    Coordinator actor that owns the REPL's lifecycle.

    On start it spawns the worker and the input actor, handing each a fresh
    sending handle to its own mailbox; it keeps none itself, so its receive
    fails once both peers are gone. It holds the only handle to the
    worker's mailbox.
    """

    def __init__(
        self,
        input_fn: Optional[InputFn] = None,
        output: Optional[TextIO] = None,
        startup_delay: float = 0.5,
        quit_on_eof: bool = False,
        mailbox_size: int = 1,
    ):
        super().__init__(mailbox_size)
        self._input_fn = input_fn
        self._output = output
        self._startup_delay = startup_delay
        self._quit_on_eof = quit_on_eof
        self._mailbox_size = mailbox_size
        self._worker: Optional[ActorRef] = None
        self._worker_joined = False
        self._deferred: Deque[MainMessage] = deque()

    def pre_start(self) -> None:
        logger.info("coordinator starting up")

    def post_stop(self) -> None:
        logger.info("coordinator is exiting")

    def on_mailbox_closed(self, error: MailboxClosed) -> None:
        logger.error("coordinator could not receive from its mailbox: %s", error)

    async def run(self) -> None:
        worker_ref = await self.context.spawn(
            WorkerActor,
            "worker",
            coordinator=self.context.new_ref(),
            mailbox_size=self._mailbox_size,
        )
        self._worker = self.own(worker_ref)

        input_ref = await self.context.spawn(
            InputActor,
            "input",
            coordinator=self.context.new_ref(),
            input_fn=self._input_fn,
            startup_delay=self._startup_delay,
            quit_on_eof=self._quit_on_eof,
            mailbox_size=self._mailbox_size,
        )
        # nothing is ever sent to the input actor
        input_ref.close()

        try:
            while self.running:
                if self._deferred:
                    message = self._deferred.popleft()
                else:
                    message = await self.mailbox.get()
                await self.receive(message)
        finally:
            if not self._worker_joined:
                # the worker may be blocked on our full mailbox
                self.mailbox.close()
                self._worker.close()
                await self.context.join(self._worker)

    async def receive(self, message: MainMessage) -> None:
        """Handle messages."""
        if isinstance(message, WorkResult):
            self.print_result(message.text)
        elif isinstance(message, UserInput):
            await self._forward(message.text)
        elif isinstance(message, MainQuit):
            logger.info("coordinator got quit request")
            await self._shutdown_worker()
            self.halt()
        else:
            logger.warning("coordinator ignoring unexpected message %r", message)

    def print_result(self, text: str) -> None:
        print(f"> {text}\n", file=self._output or sys.stdout, flush=True)

    async def _drain_while(self, operation: Awaitable[None]) -> asyncio.Task:
        """
        Await operation while still taking messages from our own mailbox.

        The worker may be blocked sending to us while we are blocked on it.
        Results that arrive meanwhile are printed; anything else is deferred
        and handled, in order, once the operation is done.

        Returns:
            The finished operation task
        """
        op_task = asyncio.ensure_future(operation)
        try:
            while not op_task.done():
                get_task = asyncio.ensure_future(self.mailbox.get())
                await asyncio.wait({op_task, get_task}, return_when=asyncio.FIRST_COMPLETED)
                if not get_task.done():
                    get_task.cancel()
                    await asyncio.wait({get_task})
                if get_task.cancelled():
                    continue
                if get_task.exception() is not None:
                    # no senders left, nothing more can arrive
                    await asyncio.wait({op_task})
                    break
                message = get_task.result()
                if isinstance(message, WorkResult):
                    self.print_result(message.text)
                else:
                    self._deferred.append(message)
        finally:
            if not op_task.done():
                op_task.cancel()
                await asyncio.wait({op_task})
        return op_task

    async def _forward(self, text: str) -> None:
        sent = await self._drain_while(self._worker.tell(DoWork(text)))
        error = sent.exception()
        if isinstance(error, SendError):
            logger.error("coordinator could not send to the worker: %s", error)
            self.halt()
        elif error is not None:
            raise error

    async def _shutdown_worker(self) -> None:
        sent = await self._drain_while(self._worker.tell(WorkerQuit()))
        error = sent.exception()
        if isinstance(error, SendError):
            logger.error("coordinator could not send quit to the worker: %s", error)
        elif error is not None:
            raise error

        await self._drain_while(self.context.join(self._worker))
        self._worker_joined = True
        logger.info("coordinator joined the worker")

        # results the worker sent just before it exited
        while not self.mailbox.empty():
            message = self.mailbox.get_nowait()
            if isinstance(message, WorkResult):
                self.print_result(message.text)
            else:
                self._deferred.append(message)

        if self._deferred:
            logger.debug("coordinator dropping %d messages received during shutdown", len(self._deferred))
            self._deferred.clear()
