"""handler.py - Bridge from the standard logging module into a LogWriter.

LogWriterHandler lets an application keep using ``logging.getLogger(...)``
calls while the resulting messages are written through a LogWriter, picking
up its prefix, postfix, line-ending behaviour and success counter.

Typical usage:
    import logging
    from linewriter import LogWriterHandler, get_writer

    get_writer().set_prefix("[svc] ")
    logging.getLogger().addHandler(LogWriterHandler())

    logging.getLogger(__name__).warning("disk almost full")
    # -> "[svc] disk almost full\\n" on stdout
"""

import logging
from typing import Optional

from .writer import LogWriter, get_writer


class LogWriterHandler(logging.Handler):
    """A logging.Handler that writes each formatted record via a LogWriter.

    The record is formatted with the handler's Formatter (``"%(message)s"``
    unless another one is set) and passed to ``LogWriter.emit_value`` as a
    single string, so one record is one counted emission.

    Thread-safety:
        ``logging.Handler`` serialises ``emit()`` with its own lock and the
        LogWriter serialises emissions, so concurrent records never interleave.

    Attributes:
        _writer (LogWriter or None): Target writer; None means "the shared
            writer at emit time".
    """

    def __init__(self, writer: Optional[LogWriter] = None, level: int = logging.NOTSET) -> None:
        """Initialise the handler.

        Args:
            writer: The LogWriter to write through. Defaults to ``get_writer()``
                resolved on every record.
            level: Minimum level handled, as for any ``logging.Handler``.
        """
        super().__init__(level=level)
        self._writer = writer
        self.setFormatter(logging.Formatter("%(message)s"))

    @property
    def writer(self) -> LogWriter:
        return self._writer if self._writer is not None else get_writer()

    def emit(self, record: logging.LogRecord) -> None:
        """Format ``record`` and write it through the target LogWriter.

        Errors are routed to ``handleError`` so a broken sink never raises
        into the application's logging call.
        """
        try:
            self.writer.emit_value(self.format(record))
        except Exception:
            self.handleError(record)
