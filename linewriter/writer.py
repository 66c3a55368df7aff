"""writer.py - The LogWriter: decorated, counted text emission.

LogWriter holds the decoration strings (prefix, postfix, separator), the
output and line-ending switches, the current Sink, and a success counter.
Every emission assembles its complete text first and hands it to the sink in
one ``write()`` call, so a failure while rendering never leaves half a line
behind.

Emission contract:
    - ``emit_sequence()`` is the core: ``prefix``, the rendered values joined
      by ``separator``, ``postfix``, then a newline if line endings are on.
      One call that writes anything counts as one success, whatever the number
      of values.
    - ``emit()`` and ``emit_value()`` are conveniences on top of it.
    - ``emit_grid()`` writes a row-major table with ``separator`` after every
      element and counts once on success.
    - ``emit_repeated()`` and ``emit_blank_lines()`` are formatting helpers and
      never touch the counter.
    - With output disabled every emission is a no-op returning 0 / False.

Typical usage:
    from linewriter import get_writer

    log = get_writer()
    log.set_prefix("[app] ")
    log.emit("si", "records loaded:", 42)    # "[app] records loaded: 42\\n"
"""

import threading
from typing import Any, Iterable, List, Optional, Sequence, Union

from .sink import Sink, StreamSink
from .values import LogValue, decode, render_number

DEFAULT_SEPARATOR = " "
LINE_TERMINATOR = "\n"

Number = Union[int, float]


class LogWriter:
    """A configurable writer for decorated lines of typed values.

    All state lives on the instance; programs that want one shared writer use
    ``get_writer()``. Configuration changes are visible to the very next
    emission.

    Thread-safety:
        Every emission and every setter runs under an ``RLock``, so text from
        two emissions is never interleaved and the counter is never lost. No
        ordering between threads is implied.

    Attributes:
        _prefix (str): Written before the first value of an emission.
        _postfix (str): Written after the last value of an emission.
        _separator (str): Written between values and after grid elements.
        _output_enabled (bool): Master switch for all emissions.
        _line_ending_enabled (bool): Append a newline after each emission.
        _sink (Sink): Current destination.
        _count (int): Number of successful emissions since the last reset.

    Example:
        >>> import io
        >>> buf = io.StringIO()
        >>> w = LogWriter(stream=buf, separator="|")
        >>> w.emit("ii", 1, 2)
        2
        >>> buf.getvalue()
        '1|2\\n'
        >>> w.get_count()
        1
    """

    def __init__(
        self,
        prefix: str = "",
        postfix: str = "",
        separator: str = DEFAULT_SEPARATOR,
        output_enabled: bool = True,
        line_ending_enabled: bool = True,
        stream: Any = None,
        sink: Optional[Sink] = None,
    ) -> None:
        """Initialise the writer.

        Args:
            prefix: Text written before the first value. Defaults to ``""``.
            postfix: Text written after the last value. Defaults to ``""``.
            separator: Text written between values. Defaults to one space.
            output_enabled: Start with output on (default) or off.
            line_ending_enabled: Terminate each emission with a newline.
            stream: A caller-owned writable text stream. Never closed by the
                writer. Mutually exclusive with ``sink``.
            sink: A Sink instance. Closed by the writer only if it is owned.

        Raises:
            ValueError: If both ``stream`` and ``sink`` are given.
        """
        if stream is not None and sink is not None:
            raise ValueError("pass either stream or sink, not both")
        self._lock = threading.RLock()
        self._prefix = prefix
        self._postfix = postfix
        self._separator = separator
        self._output_enabled = output_enabled
        self._line_ending_enabled = line_ending_enabled
        self._sink: Sink = StreamSink()
        self._count = 0
        if stream is not None or sink is not None:
            self.set_stream(sink if sink is not None else stream)

    def __enter__(self) -> "LogWriter":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    # ---------------------------------------------------------------------- #
    # Emission
    # ---------------------------------------------------------------------- #

    def emit_sequence(self, values: Iterable[LogValue]) -> int:
        """Write a sequence of typed values as one decorated line.

        Behaviour:
            1. Return 0 without writing if output is disabled or ``values``
               is empty.
            2. Otherwise write ``prefix``, the rendered values separated by
               ``separator``, ``postfix`` and (if enabled) a newline.
            3. Increment the success counter by exactly one.

        Args:
            values: LogValue objects in emission order.

        Returns:
            The number of values written.
        """
        with self._lock:
            if not self._output_enabled:
                return 0
            rendered = [value.render() for value in values]
            if not rendered:
                return 0
            self._write(self._decorate(self._separator.join(rendered)))
            self._count += 1
            return len(rendered)

    def emit(self, descriptor: str, *args: Any) -> int:
        """Write values described by a type descriptor string.

        ``descriptor`` holds one character per argument: ``b`` bool, ``i``
        int, ``f``/``d`` float, ``c`` char, ``s`` string. Unknown characters
        consume their argument and write nothing.

        Returns:
            The number of values written; 0 if output is disabled or nothing
            decodes.

        Example:
            >>> w.emit("fcsib", 3.41, "c", "text", 42, True)   # doctest: +SKIP
            5
        """
        with self._lock:
            if not self._output_enabled or not descriptor:
                return 0
            return self.emit_sequence(decode(descriptor, *args))

    def emit_value(self, value: Union[str, int, float, None] = "") -> bool:
        """Write a single string, integer or float; True if it was written."""
        return self.emit_sequence([LogValue.infer(value)]) == 1

    def emit_grid(
        self, grid: Optional[Sequence[Sequence[Number]]], rows: int, cols: int
    ) -> bool:
        """Write a two-dimensional numeric grid row by row.

        Each element is followed by ``separator``; each row is followed by a
        newline when line endings are enabled. Prefix and postfix are not
        used. The whole grid is rendered before anything is written: if any
        element cannot be rendered as a number, nothing is written and the
        counter is unchanged.

        Args:
            grid: Row-major numbers, e.g. a list of lists or a 2-D NumPy array.
            rows: Expected number of rows; must equal ``len(grid)``.
            cols: Expected number of columns; must equal every row's length.

        Returns:
            True if the grid was written (an empty grid counts), False if
            output is disabled, ``grid`` is None, the dimensions do not match,
            or an element failed to render.
        """
        with self._lock:
            if not self._output_enabled or grid is None:
                return False
            if rows != len(grid) or any(len(row) != cols for row in grid):
                return False

            end = LINE_TERMINATOR if self._line_ending_enabled else ""
            lines: List[str] = []
            try:
                for row in grid:
                    cells = "".join(render_number(x) + self._separator for x in row)
                    lines.append(cells + end)
            except (TypeError, ValueError, OverflowError):
                return False

            text = "".join(lines)
            if text:
                self._write(text)
            self._count += 1
            return True

    def emit_repeated(self, count: int, token: str, use_separator: bool = False) -> None:
        """Write ``token`` ``abs(count)`` times as one decorated line.

        Repetitions are joined by ``separator`` only when ``use_separator`` is
        True. Nothing is written for a zero count or disabled output. The
        success counter is never changed.
        """
        with self._lock:
            times = abs(count)
            if not self._output_enabled or times == 0:
                return
            joiner = self._separator if use_separator else ""
            self._write(self._decorate(joiner.join([token] * times)))

    def emit_blank_lines(self, count: int = 1) -> None:
        """Write ``abs(count)`` bare newlines, ignoring decoration and the counter."""
        with self._lock:
            times = abs(count)
            if not self._output_enabled or times == 0:
                return
            self._write(LINE_TERMINATOR * times)

    # ---------------------------------------------------------------------- #
    # Configuration
    # ---------------------------------------------------------------------- #

    def set_prefix(self, prefix: str = "") -> None:
        """Set the text written before the first value of each emission."""
        with self._lock:
            self._prefix = prefix

    def set_postfix(self, postfix: str = "") -> None:
        """Set the text written after the last value of each emission."""
        with self._lock:
            self._postfix = postfix

    def set_separator(self, separator: str = DEFAULT_SEPARATOR) -> None:
        """Set the text written between values and after grid elements."""
        with self._lock:
            self._separator = separator

    def clear_prefix(self) -> None:
        """Remove the prefix."""
        self.set_prefix("")

    def clear_postfix(self) -> None:
        """Remove the postfix."""
        self.set_postfix("")

    def reset_separator(self) -> None:
        """Restore the default single-space separator."""
        self.set_separator(DEFAULT_SEPARATOR)

    def set_output_enabled(self, enabled: bool = True) -> None:
        """Turn all emissions on or off."""
        with self._lock:
            self._output_enabled = bool(enabled)

    def set_line_ending_enabled(self, enabled: bool = True) -> None:
        """Choose whether each emission ends with a newline."""
        with self._lock:
            self._line_ending_enabled = bool(enabled)

    def set_stream(self, target: Any = None) -> None:
        """Replace the destination.

        Args:
            target: A Sink, any object with a ``write()`` method (wrapped in a
                non-owning StreamSink), or None to go back to stdout.

        The previous sink is closed only if the writer owns it. Streams
        supplied by the caller are never closed.

        Raises:
            TypeError: If ``target`` is neither a Sink nor writable.
        """
        if target is None:
            new_sink: Sink = StreamSink()
        elif isinstance(target, Sink):
            new_sink = target
        else:
            new_sink = StreamSink(target)

        with self._lock:
            old_sink = self._sink
            self._sink = new_sink
            if old_sink is not new_sink and old_sink.owned:
                old_sink.close()

    def reset_count(self) -> None:
        """Set the success counter back to zero."""
        with self._lock:
            self._count = 0

    def close(self) -> None:
        """Close an owned sink and fall back to stdout."""
        self.set_stream(None)

    # ---------------------------------------------------------------------- #
    # Accessors
    # ---------------------------------------------------------------------- #

    @property
    def prefix(self) -> str:
        """Text written before the first value."""
        return self._prefix

    @property
    def postfix(self) -> str:
        """Text written after the last value."""
        return self._postfix

    @property
    def separator(self) -> str:
        """Text written between values."""
        return self._separator

    @property
    def output_enabled(self) -> bool:
        """True while emissions are written."""
        return self._output_enabled

    @property
    def line_ending_enabled(self) -> bool:
        """True if emissions end with a newline."""
        return self._line_ending_enabled

    @property
    def sink(self) -> Sink:
        """The current destination."""
        return self._sink

    @property
    def count(self) -> int:
        """Number of successful emissions since the last reset."""
        return self._count

    def get_prefix(self) -> str:
        """Return the current prefix."""
        return self._prefix

    def get_postfix(self) -> str:
        """Return the current postfix."""
        return self._postfix

    def get_separator(self) -> str:
        """Return the current separator."""
        return self._separator

    def is_output_enabled(self) -> bool:
        """Return True if output is enabled."""
        return self._output_enabled

    def is_line_ending_enabled(self) -> bool:
        """Return True if line endings are enabled."""
        return self._line_ending_enabled

    def get_count(self) -> int:
        """Return the number of successful emissions since the last reset."""
        return self._count

    # ---------------------------------------------------------------------- #
    # Private helpers
    # ---------------------------------------------------------------------- #

    def _decorate(self, body: str) -> str:
        end = LINE_TERMINATOR if self._line_ending_enabled else ""
        return f"{self._prefix}{body}{self._postfix}{end}"

    def _write(self, text: str) -> None:
        self._sink.write(text)
        self._sink.flush()


# ---------------------------------------------------------------------------
# Process-wide default writer.
#
# Created on the first get_writer() call and kept until the process exits
# (or reset_writer() is called). Programs that prefer explicit wiring simply
# construct their own LogWriter and never touch this.
# ---------------------------------------------------------------------------
_default_writer: Optional[LogWriter] = None
_default_lock = threading.Lock()


def get_writer() -> LogWriter:
    """Return the shared LogWriter, creating it on first use.

    Example:
        >>> get_writer() is get_writer()
        True
    """
    global _default_writer
    with _default_lock:
        if _default_writer is None:
            _default_writer = LogWriter()
        return _default_writer


def reset_writer() -> None:
    """Close and discard the shared LogWriter; the next get_writer() builds a new one."""
    global _default_writer
    with _default_lock:
        if _default_writer is not None:
            _default_writer.close()
        _default_writer = None
