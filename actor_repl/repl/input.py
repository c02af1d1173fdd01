"""Input actor: reads lines and forwards them to the coordinator.

The input source is an async function returning the next raw line, or None
at end of stream. By default it reads standard input on a daemon thread, so
a blocked read never holds up the event loop or interpreter exit.

    # Custom input source (for testing, scripted sessions, etc.)
    await system.spawn(InputActor, "input", coordinator=ref, input_fn=my_reader)
"""

import asyncio
import sys
import threading
from typing import Awaitable, Callable, Optional

from actor_repl.core.actor import SourceActor
from actor_repl.core.actor_ref import ActorRef
from actor_repl.core.logging import get_logger
from actor_repl.errors import MailboxClosed, SendError
from actor_repl.messaging.message import MainQuit, UserInput


logger = get_logger(__name__)

QUIT_COMMAND = "quit"

InputFn = Callable[[], Awaitable[Optional[str]]]


async def read_stdin_line() -> Optional[str]:
    """
    Read one line from stdin without blocking the event loop.

    Returns None at end of stream. An OSError raised by the read is
    re-raised in the awaiting task.
    """
    loop = asyncio.get_running_loop()
    future: asyncio.Future = loop.create_future()

    def settle(line: Optional[str], error: Optional[BaseException]) -> None:
        if future.done():
            return
        if error is not None:
            future.set_exception(error)
        else:
            future.set_result(line or None)

    def read() -> None:
        line, error = None, None
        try:
            stream = sys.stdin
            if stream is None:
                raise OSError("standard input is not available")
            line = stream.readline()
        except (OSError, ValueError) as e:
            error = e if isinstance(e, OSError) else OSError(str(e))
        try:
            loop.call_soon_threadsafe(settle, line, error)
        except RuntimeError:
            # event loop already closed; nobody is waiting for this line
            pass

    # not run_in_executor: asyncio.run waits for executor threads on exit, and this one may never return
    threading.Thread(target=read, name="input-reader", daemon=True).start()
    return await future


class InputActor(SourceActor):
    """
    Source actor turning lines of input into coordinator messages.

    A line equal to "quit" (after stripping trailing whitespace) sends
    MainQuit and ends the actor. Other lines are sent as UserInput. The
    actor also ends when the stream closes, when a read fails, or when the
    coordinator is gone.
    """

    def __init__(
        self,
        coordinator: ActorRef,
        input_fn: Optional[InputFn] = None,
        startup_delay: float = 0.5,
        quit_on_eof: bool = False,
        mailbox_size: int = 1,
    ):
        """
        Args:
            coordinator: Sending handle to the coordinator; owned by this actor
            input_fn: Async function returning the next line, or None at end
                      of stream. Defaults to reading stdin.
            startup_delay: Seconds to wait before the first read
            quit_on_eof: Send MainQuit when the stream ends
            mailbox_size: Unused capacity of the (never used) inbound mailbox
        """
        super().__init__(mailbox_size)
        self._coordinator = self.own(coordinator)
        self._input_fn = input_fn or read_stdin_line
        self._startup_delay = startup_delay
        self._quit_on_eof = quit_on_eof

    def pre_start(self) -> None:
        logger.info("input starting up")

    def post_stop(self) -> None:
        logger.info("input is exiting")

    def on_mailbox_closed(self, error: MailboxClosed) -> None:
        logger.error("input could not send to the coordinator: %s", error)

    async def produce(self) -> None:
        if self._startup_delay > 0:
            await asyncio.sleep(self._startup_delay)
        logger.info("welcome to the repl")

        while True:
            try:
                line = await self._input_fn()
            except OSError as e:
                logger.error("input could not read from the input stream: %s", e)
                return

            if line is None:
                if self._quit_on_eof:
                    logger.info("input reached end of stream, quitting")
                    await self._send_quit()
                else:
                    logger.info("input reached end of stream")
                return

            text = line.rstrip()
            if text == QUIT_COMMAND:
                logger.info("input got quit request")
                await self._send_quit()
                return

            await self._coordinator.tell(UserInput(text))

    async def _send_quit(self) -> None:
        try:
            await self._coordinator.tell(MainQuit())
        except SendError as e:
            logger.error("input could not send quit to the coordinator: %s", e)
