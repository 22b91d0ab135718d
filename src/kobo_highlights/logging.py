"""Logging utilities."""

from __future__ import annotations

import contextlib
import contextvars
import logging
from typing import Any

from rich.logging import RichHandler


_book_var: contextvars.ContextVar[str] = contextvars.ContextVar("kobo_highlights_book", default="-")


class _ContextFilter(logging.Filter):
    """Inject the book being exported into log records."""

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: A003
        record.book = _book_var.get()  # type: ignore[attr-defined]
        return True


@contextlib.contextmanager
def book_context(book: str) -> Any:
    """Temporarily bind the current book for structured logging.

    Args:
        book: Book title or content id.
    """

    token = _book_var.set(book)
    try:
        yield
    finally:
        _book_var.reset(token)


def configure_logging(level: str = "INFO") -> None:
    """Configure application logging.

    Args:
        level: Logging level name.
    """

    handler = RichHandler(rich_tracebacks=True, show_time=True, show_level=True)
    handler.addFilter(_ContextFilter())

    formatter = logging.Formatter(
        fmt="%(asctime)s %(levelname)s book=%(book)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(level.upper())
    # Avoid duplicate handlers if configure_logging is called multiple times
    if not any(isinstance(h, RichHandler) for h in root.handlers):
        root.addHandler(handler)
    else:
        for h in root.handlers:
            if isinstance(h, RichHandler):
                h.addFilter(_ContextFilter())
                h.setFormatter(formatter)


def get_logger(name: str) -> logging.Logger:
    """Get a module logger."""

    return logging.getLogger(name)
