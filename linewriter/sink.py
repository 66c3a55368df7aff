"""sink.py - Output destinations for LogWriter.

A Sink is where rendered text ends up. The interesting part is ownership:

    StreamSink  wraps a stream that belongs to someone else (default: stdout).
                The writer never closes it unless it was explicitly handed
                over with ``owned=True``.
    FileSink    opens its own file, so the writer owns it and closes it when
                the sink is replaced or the writer is closed.

Typical usage::

    from linewriter import LogWriter
    from linewriter.sink import FileSink

    with LogWriter(sink=FileSink("/tmp/run.log")) as writer:
        writer.emit_value("started")
"""

import logging
import os
import sys
from abc import ABC, abstractmethod
from typing import IO, Optional

logger = logging.getLogger(__name__)


class Sink(ABC):
    """Abstract base class for all LogWriter destinations.

    Subclasses implement ``write()``; ``flush()`` and ``close()`` default to
    no-ops. ``owned`` tells LogWriter whether it may close the sink.

    Example:
        >>> class ListSink(Sink):
        ...     def __init__(self):
        ...         self.chunks = []
        ...     def write(self, text: str) -> None:
        ...         self.chunks.append(text)
    """

    @property
    def owned(self) -> bool:
        """True if the writer holding this sink is responsible for closing it."""
        return False

    @abstractmethod
    def write(self, text: str) -> None:
        """Write ``text`` to the destination as a single chunk."""

    def flush(self) -> None:
        """Flush buffered output, if the destination buffers."""

    def close(self) -> None:
        """Release the destination. Only called on owned sinks."""


class StreamSink(Sink):
    """Write to a text stream such as ``sys.stdout`` or an ``io.StringIO``.

    When no stream is given the sink looks ``sys.stdout`` up at every write,
    so redirection of stdout (e.g. by test harnesses) is respected.

    Attributes:
        _stream: The wrapped stream, or None for "current sys.stdout".
        _owned (bool): Whether ``close()`` really closes the stream.
    """

    def __init__(self, stream: Optional[IO[str]] = None, owned: bool = False) -> None:
        """Initialise the stream sink.

        Args:
            stream: Any object with a ``write(str)`` method. Defaults to the
                current ``sys.stdout``.
            owned: Hand ownership of ``stream`` to the writer. Ignored for the
                default stdout stream, which is never closed.

        Raises:
            TypeError: If ``stream`` has no callable ``write`` attribute.
        """
        if stream is not None and not callable(getattr(stream, "write", None)):
            raise TypeError(f"stream must have a write() method, got {stream!r}")
        self._stream = stream
        self._owned = owned and stream is not None

    @property
    def owned(self) -> bool:
        return self._owned

    @property
    def stream(self) -> IO[str]:
        return self._stream if self._stream is not None else sys.stdout

    def write(self, text: str) -> None:
        self.stream.write(text)

    def flush(self) -> None:
        flush = getattr(self.stream, "flush", None)
        if flush is not None:
            flush()

    def close(self) -> None:
        if self._owned:
            logger.debug("closing owned stream %r", self._stream)
            self._stream.close()

    def __repr__(self) -> str:  # pragma: no cover
        target = "stdout" if self._stream is None else repr(self._stream)
        return f"StreamSink({target}, owned={self._owned})"


class FileSink(Sink):
    """Write to a file on disk that the sink opens and owns.

    The file (and any missing parent directories) is created on the first
    write, so constructing a FileSink that is never used touches nothing.

    Attributes:
        _path (str): Path of the output file.
        _mode (str): ``"a"`` to append, ``"w"`` to truncate on open.
        _encoding (str): File encoding.
        _file: The open file object, or None before the first write.

    Example:
        >>> sink = FileSink("./run.log", mode="w")
    """

    def __init__(self, path: str, mode: str = "a", encoding: str = "utf-8") -> None:
        """Initialise the file sink.

        Args:
            path: Path to the output file.
            mode: ``"a"`` (default) appends, ``"w"`` truncates on first write.
            encoding: Character encoding. Defaults to ``"utf-8"``.

        Raises:
            ValueError: If ``mode`` is neither ``"a"`` nor ``"w"``.
        """
        if mode not in ("a", "w"):
            raise ValueError(f"mode must be 'a' or 'w', got {mode!r}")
        self._path = path
        self._mode = mode
        self._encoding = encoding
        self._file: Optional[IO[str]] = None

    @property
    def owned(self) -> bool:
        return True

    @property
    def path(self) -> str:
        return self._path

    @property
    def closed(self) -> bool:
        """True once the sink has been closed (or before it was ever opened)."""
        return self._file is None or self._file.closed

    def write(self, text: str) -> None:
        if self._file is None or self._file.closed:
            self._open()
        self._file.write(text)

    def flush(self) -> None:
        if self._file is not None and not self._file.closed:
            self._file.flush()

    def close(self) -> None:
        if self._file is not None and not self._file.closed:
            logger.debug("closing file sink %s", self._path)
            self._file.close()

    # ---------------------------------------------------------------------- #
    # Private helpers
    # ---------------------------------------------------------------------- #

    def _open(self) -> None:
        parent = os.path.dirname(os.path.abspath(self._path))
        os.makedirs(parent, exist_ok=True)
        self._file = open(self._path, self._mode, encoding=self._encoding)
        # Reopening after close() must not truncate what was already written.
        self._mode = "a"

    def __repr__(self) -> str:  # pragma: no cover
        return f"FileSink({self._path!r})"
