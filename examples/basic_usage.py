"""examples/basic_usage.py - linewriter walkthrough on stdout.

Demonstrates:
    Section 0: single values with and without prefix/postfix
    Section 1: mixed typed values via a descriptor string
    Section 2: the same with a custom separator
    Section 3: a numeric grid
    Section 4: repeated tokens and blank lines

Run:
    python examples/basic_usage.py
"""

from linewriter import LogValue, get_writer

VERSION = "v0.1.0"

log = get_writer()


def banner(title: str) -> None:
    log.emit_blank_lines()
    log.emit_value(title)
    log.emit_repeated(50, "#")


def report_count() -> None:
    log.emit_blank_lines()
    log.emit("si", "Successful number of logs:", log.get_count())


# ===========================================================================
# Section 0: single values
# ===========================================================================


def single_values() -> None:
    banner("0. logging normal strings")
    log.set_prefix("Log ----- ")
    log.set_postfix(" ----- /Log")
    log.emit_value("string 1")
    log.clear_postfix()
    log.emit_value("string 2")
    log.clear_prefix()
    log.emit_value("string 3")
    log.set_output_enabled(False)
    log.emit_value("string 4")  # not written, not counted
    log.set_output_enabled(True)
    report_count()


# ===========================================================================
# Sections 1 and 2: typed sequences
# ===========================================================================


def typed_sequences(separator: str) -> None:
    log.set_separator(separator)
    log.set_prefix("Log ----- ")
    log.set_postfix(" ----- /Log")
    log.emit("fcsib", 3.41, "c", "string 1", 42, True)
    log.clear_postfix()
    log.emit_sequence(
        [
            LogValue.real(3.41),
            LogValue.char("c"),
            LogValue.text("string 2"),
            LogValue.integer(42),
            LogValue.boolean(False),
        ]
    )
    log.clear_prefix()
    log.emit("fcsib", 3.41, "c", "string 3", 42, True)
    log.reset_separator()
    report_count()


# ===========================================================================
# Section 3 and 4: grid and helpers
# ===========================================================================


def grid() -> None:
    banner("3. logging a grid")
    log.set_separator("\t")
    log.emit_grid([[1.0, 2.5, 3.0], [4.0, 5.0, 6.25]], 2, 3)
    log.reset_separator()
    report_count()


def helpers() -> None:
    banner("4. helpers")
    log.set_separator(" - ")
    log.emit_repeated(5, "x", use_separator=True)
    log.reset_separator()
    log.emit_blank_lines(2)
    log.emit_repeated(-3, "=")  # absolute value is used
    report_count()


if __name__ == "__main__":
    log.emit_blank_lines(2)
    log.emit_value(f"linewriter {VERSION} test drive")
    log.emit_blank_lines()

    single_values()
    banner("1. logging variable number of arguments (default separator)")
    typed_sequences(" ")
    banner("2. logging variable number of arguments (custom separator)")
    typed_sequences(" - ")
    grid()
    helpers()

    log.reset_count()
    report_count()
