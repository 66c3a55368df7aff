"""linewriter/__init__.py - Public API for the linewriter package.

linewriter is a low-ceremony text logger for small programs: one writer that
renders typed values into decorated lines (prefix, values joined by a
separator, postfix, newline) and counts how many lines it wrote.

Quick start:
    from linewriter import get_writer, LogValue

    log = get_writer()                       # shared writer on stdout
    log.emit_value("starting")               # "starting"
    log.emit("sid", "pi is", 3, 3.14159)     # "pi is 3 3.14159"

    log.set_prefix("Log ----- ")
    log.set_separator(" - ")
    log.emit_sequence([LogValue.char("c"), LogValue.boolean(True)])
                                             # "Log ----- c - true"

    log.emit_grid([[1, 2], [3, 4]], 2, 2)    # "1 - 2 - \\n3 - 4 - \\n"
    log.emit_repeated(10, "#")               # "Log ----- ##########"
    log.get_count()                          # 4

Exported names:
    LogWriter:         The writer; construct one per program or use get_writer().
    get_writer:        The process-wide shared LogWriter, created on first use.
    reset_writer:      Discard the shared writer (mainly for tests).
    LogValue:          Type-tagged value rendered by the writer.
    ValueType:         The tags: BOOL, INT, FLOAT, CHAR, TEXT.
    decode:            Turn a descriptor string plus arguments into LogValues.
    Sink:              Base class for destinations.
    StreamSink:        Writes to a caller-owned stream (default: stdout).
    FileSink:          Writes to a file the writer owns and closes.
    LogWriterHandler:  logging.Handler that writes records through a LogWriter.
"""

from .values import LogValue, ValueType, decode
from .sink import Sink, StreamSink, FileSink
from .writer import LogWriter, get_writer, reset_writer
from .handler import LogWriterHandler

__all__ = [
    "LogWriter",
    "get_writer",
    "reset_writer",
    "LogValue",
    "ValueType",
    "decode",
    "Sink",
    "StreamSink",
    "FileSink",
    "LogWriterHandler",
]
__version__ = "0.1.0"
