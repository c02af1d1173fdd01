"""Worker actor: executes commands and reports results to the coordinator."""

from actor_repl.core.actor import Actor
from actor_repl.core.actor_ref import ActorRef
from actor_repl.core.logging import get_logger
from actor_repl.errors import CommandParseError, MailboxClosed, SendError
from actor_repl.messaging.message import DoWork, WorkerMessage, WorkerQuit, WorkResult
from .work import Add, Help, Ping, parse_work


logger = get_logger(__name__)

HELP_TEXT = "available commands: add, ping, help (or ?), quit"


class WorkerActor(Actor):
    """
    Worker actor that parses and runs one command per DoWork message.

    Every DoWork produces exactly one WorkResult, including for commands that
    fail to parse. WorkerQuit ends the loop without a reply. If the
    coordinator is gone when a result is sent, the worker logs the failure
    and stops.

    Sums are exact: Python integers do not wrap, so `add` of two large
    32-bit values reports a number above the 32-bit range.
    """

    def __init__(self, coordinator: ActorRef, mailbox_size: int = 1):
        super().__init__(mailbox_size)
        self._coordinator = self.own(coordinator)
        self.pings = 0

    def pre_start(self) -> None:
        logger.info("worker starting up")

    def post_stop(self) -> None:
        logger.info("worker is exiting")

    def on_mailbox_closed(self, error: MailboxClosed) -> None:
        if isinstance(error, SendError):
            logger.error("worker could not send to the coordinator: %s", error)
        else:
            logger.error("worker could not receive from its mailbox: %s", error)

    async def receive(self, message: WorkerMessage) -> None:
        """Handle messages."""
        if isinstance(message, WorkerQuit):
            logger.info("worker got quit request")
            self.halt()
        elif isinstance(message, DoWork):
            await self._coordinator.tell(WorkResult(self.execute(message.text)))
        else:
            logger.warning("worker ignoring unexpected message %r", message)

    def execute(self, text: str) -> str:
        """Parse and run one command, returning the text to report."""
        try:
            work = parse_work(text)
        except CommandParseError as e:
            return f"worker thread could not parse work: {e}"

        if isinstance(work, Add):
            return str(work.a + work.b)
        if isinstance(work, Ping):
            self.pings += 1
            unit = "time" if self.pings == 1 else "times"
            return f"ping'd worker thread {self.pings} {unit}"
        if isinstance(work, Help):
            return HELP_TEXT
        raise TypeError(f"unhandled work {work!r}")
