"""A read-eval-print loop built from three actors talking over bounded mailboxes."""

__version__ = "0.1.0"
