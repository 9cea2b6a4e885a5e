# Vocabs Registry - a temporal metadata registry for controlled vocabularies
# Copyright (C) 2026 Vocabs Registry contributors
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.
# =============================================================================
"""Configures logging setup."""

import contextvars
import logging
from contextlib import contextmanager
from functools import wraps
from types import TracebackType
from typing import Any, Callable, Iterator, Optional, Tuple, Type, Union

# The vocabulary currently being compared on this thread, if any. Attached to
# every log record produced while it is set.
_vocabulary_id: contextvars.ContextVar[Optional[int]] = contextvars.ContextVar(
    "vocabulary_id", default=None
)


def with_context(func: Callable) -> Callable:
    current_context = contextvars.copy_context()

    @wraps(func)
    def _wrapper(*args: Any, **kwargs: Any) -> Any:
        return current_context.copy().run(func, *args, **kwargs)

    return _wrapper


@contextmanager
def vocabulary_context(vocabulary_id: Optional[int]) -> Iterator[None]:
    """Tags all log records emitted inside the block with |vocabulary_id|."""
    token = _vocabulary_id.set(vocabulary_id)
    try:
        yield
    finally:
        _vocabulary_id.reset(token)


class ContextualLogRecord(logging.LogRecord):
    """Fetches context from when the record was produced and adds it to the record.

    This must happen when the record is produced, not during formatting or emitting
    as those may happen asynchronously on a separate thread with different
    context.
    """

    # pylint: disable=too-many-positional-arguments
    def __init__(
        self,
        name: str,
        level: int,
        pathname: str,
        lineno: int,
        msg: str,
        args: Tuple[Any, ...],
        exc_info: Union[
            Tuple[Type[BaseException], BaseException, Optional[TracebackType]],
            Tuple[None, None, None],
            None,
        ],
        func: Optional[str] = None,
        sinfo: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            name,
            level,
            pathname,
            lineno,
            msg,
            args,
            exc_info,
            func=func,
            sinfo=sinfo,
            # Skip kwargs, they are unused and mypy complains.
        )

        self.vocabulary_id = str(_vocabulary_id.get())


def setup(level: int = logging.INFO) -> None:
    """Setup logging"""
    logging.setLogRecordFactory(ContextualLogRecord)
    logging.basicConfig(level=level)
    logger = logging.getLogger()

    for handler in logger.handlers:
        # Prefix the log with the context that would otherwise be lost when
        # comparisons for many vocabularies are interleaved.
        handler.setFormatter(
            logging.Formatter(
                "[pid: %(process)d] (vocabulary: %(vocabulary_id)s) %(module)s/%(funcName)s : %(message)s"
            )
        )
