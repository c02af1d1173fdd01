"""The three-actor REPL: input, coordinator and worker."""

from .coordinator import CoordinatorActor
from .input import InputActor, read_stdin_line
from .main import run_repl
from .work import Add, Help, Ping, Work, parse_work
from .worker import HELP_TEXT, WorkerActor

__all__ = [
    "Add",
    "CoordinatorActor",
    "HELP_TEXT",
    "Help",
    "InputActor",
    "Ping",
    "Work",
    "WorkerActor",
    "parse_work",
    "read_stdin_line",
    "run_repl",
]
