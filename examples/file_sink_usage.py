"""examples/file_sink_usage.py - Write to a file instead of stdout.

Demonstrates sink ownership: a FileSink is opened and closed by the writer,
while a caller-supplied stream is left untouched when it is replaced.

Run:
    python examples/file_sink_usage.py
    cat /tmp/linewriter_demo/run.log
"""

import io
import os

from linewriter import FileSink, LogWriter

LOG_FILE = "/tmp/linewriter_demo/run.log"


if __name__ == "__main__":
    with LogWriter(sink=FileSink(LOG_FILE, mode="w"), prefix="[run] ") as writer:
        writer.emit("si", "epoch", 1)
        writer.emit("sd", "loss", 0.4213)
        writer.emit_grid([[0.9, 0.1], [0.2, 0.8]], 2, 2)

        # Switching to a caller-owned buffer closes the FileSink (owned) ...
        capture = io.StringIO()
        writer.set_stream(capture)
        writer.emit_value("captured in memory")

        # ... and switching away again leaves the caller's buffer open.
        writer.set_stream(None)
        print(f"buffer still open: {not capture.closed}")
        print(f"buffer contents: {capture.getvalue()!r}")
        print(f"successful emissions: {writer.get_count()}")

    print()
    if os.path.exists(LOG_FILE):
        print(f"--- Contents of {LOG_FILE} ---")
        with open(LOG_FILE, encoding="utf-8") as f:
            print(f.read())
