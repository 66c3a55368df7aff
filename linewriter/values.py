"""values.py - Tagged values and their text rendering.

LogValue is the unit of emission for LogWriter: an immutable pair of a
``ValueType`` tag and the payload it describes. Every emission operation
renders LogValue objects through ``render()``, so the rendering rules for
booleans, integers, reals, characters and text live in exactly one place.

The compact descriptor form (one character per argument, e.g. ``"si"`` for a
string followed by an integer) is supported through ``decode()``:

    =========  ==========
    Character  ValueType
    =========  ==========
    ``b``      BOOL
    ``i``      INT
    ``f``/``d`` FLOAT
    ``c``      CHAR
    ``s``      TEXT
    =========  ==========

Unknown characters still consume their positional argument so the remaining
arguments stay aligned, but they produce no value.
"""

import enum
import numbers
from typing import Any, List, Optional


class ValueType(enum.Enum):
    """Type tag carried by every LogValue."""

    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    CHAR = "char"
    TEXT = "text"


DESCRIPTOR_TAGS = {
    "b": ValueType.BOOL,
    "i": ValueType.INT,
    "f": ValueType.FLOAT,
    "d": ValueType.FLOAT,
    "c": ValueType.CHAR,
    "s": ValueType.TEXT,
}


def render_number(number: Any) -> str:
    """Render a real number the way a default numeric stream format does.

    Six significant digits, trailing zeros removed, exponent notation for
    very large or very small magnitudes.

    Args:
        number: Any ``numbers.Real`` (``int``, ``float``,
            ``fractions.Fraction``, NumPy scalars).

    Returns:
        The rendered string, e.g. ``"1"`` for ``1.0`` and ``"3.41"`` for ``3.41``.

    Raises:
        TypeError: If ``number`` is not a real number (booleans included).
        ValueError: If ``number`` cannot be converted to a float.
        OverflowError: If ``number`` is too large for a float.

    Example:
        >>> render_number(2.0)
        '2'
        >>> render_number(1234567.0)
        '1.23457e+06'
    """
    if isinstance(number, bool) or not isinstance(number, numbers.Real):
        raise TypeError(f"expected a real number, got {type(number).__name__}")
    return format(float(number), "g")


class LogValue:
    """An immutable, type-tagged value ready to be rendered.

    Attributes:
        type (ValueType): Tag selecting the rendering rule.
        value: The payload. ``None`` is only meaningful for TEXT, where it
            renders as an empty string.

    Example:
        >>> LogValue.boolean(True).render()
        'true'
        >>> LogValue.infer(42).type
        <ValueType.INT: 'int'>
    """

    __slots__ = ("type", "value")

    def __init__(self, type: ValueType, value: Any) -> None:
        """Create a LogValue, validating the payload against its tag.

        Args:
            type: The ValueType tag.
            value: The payload for that tag.

        Raises:
            TypeError: If ``type`` is not a ValueType, or the payload has the
                wrong Python type for INT, FLOAT or TEXT.
            ValueError: If a CHAR payload is not exactly one character, a
                FLOAT payload does not fit in a float, or an INT payload has
                too many digits to be converted to text.
        """
        if not isinstance(type, ValueType):
            raise TypeError(f"type must be a ValueType, got {type!r}")
        if type is ValueType.INT and not isinstance(value, numbers.Integral):
            raise TypeError(f"INT value must be an integer, got {value!r}")
        if type is ValueType.FLOAT and (
            isinstance(value, bool) or not isinstance(value, numbers.Real)
        ):
            raise TypeError(f"FLOAT value must be a real number, got {value!r}")
        if type is ValueType.FLOAT:
            try:
                float(value)
            except OverflowError as exc:
                raise ValueError(f"FLOAT value is out of range: {exc}") from exc
        if type is ValueType.INT:
            # Interpreters with an integer string conversion limit reject huge values.
            try:
                str(int(value))
            except ValueError as exc:
                raise ValueError(f"INT value cannot be rendered: {exc}") from exc
        if type is ValueType.CHAR and not (isinstance(value, str) and len(value) == 1):
            raise ValueError(f"CHAR value must be a single character, got {value!r}")
        if type is ValueType.TEXT and value is not None and not isinstance(value, str):
            raise TypeError(f"TEXT value must be a str or None, got {value!r}")
        object.__setattr__(self, "type", type)
        object.__setattr__(self, "value", value)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("LogValue is immutable")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LogValue):
            return NotImplemented
        return self.type is other.type and self.value == other.value

    def __hash__(self) -> int:
        return hash((self.type, self.value))

    def __repr__(self) -> str:  # pragma: no cover
        return f"LogValue({self.type.name}, {self.value!r})"

    # ---------------------------------------------------------------------- #
    # Factories
    # ---------------------------------------------------------------------- #

    @classmethod
    def boolean(cls, value: Any) -> "LogValue":
        """BOOL value from the truthiness of ``value``."""
        return cls(ValueType.BOOL, bool(value))

    @classmethod
    def integer(cls, value: int) -> "LogValue":
        """INT value, rendered in decimal."""
        return cls(ValueType.INT, value)

    @classmethod
    def real(cls, value: float) -> "LogValue":
        """FLOAT value, rendered with six significant digits."""
        return cls(ValueType.FLOAT, value)

    @classmethod
    def char(cls, value: str) -> "LogValue":
        """CHAR value holding exactly one character."""
        return cls(ValueType.CHAR, value)

    @classmethod
    def text(cls, value: Optional[str]) -> "LogValue":
        """TEXT value; None renders as an empty string."""
        return cls(ValueType.TEXT, value)

    @classmethod
    def infer(cls, obj: Any) -> "LogValue":
        """Build a LogValue by inspecting a plain Python object.

        ``bool`` is checked before ``int`` because it is a subclass of it.
        Strings always become TEXT; use ``LogValue.char`` for CHAR.
        A LogValue passed in is returned unchanged.

        Raises:
            TypeError: If no tag fits ``obj``.
        """
        if isinstance(obj, LogValue):
            return obj
        if isinstance(obj, bool):
            return cls.boolean(obj)
        if isinstance(obj, numbers.Integral):
            return cls.integer(obj)
        if isinstance(obj, numbers.Real):
            return cls.real(obj)
        if obj is None or isinstance(obj, str):
            return cls.text(obj)
        raise TypeError(f"cannot log a value of type {type(obj).__name__}")

    # ---------------------------------------------------------------------- #
    # Rendering
    # ---------------------------------------------------------------------- #

    def render(self) -> str:
        """Return the text written to the sink for this value."""
        if self.type is ValueType.BOOL:
            return "true" if self.value else "false"
        if self.type is ValueType.INT:
            return str(int(self.value))
        if self.type is ValueType.FLOAT:
            return render_number(self.value)
        if self.type is ValueType.CHAR:
            return self.value
        return "" if self.value is None else self.value


def decode(descriptor: str, *args: Any) -> List[LogValue]:
    """Decode a descriptor string and its positional arguments into LogValues.

    Each character of ``descriptor`` consumes exactly one argument, left to
    right. Characters outside ``DESCRIPTOR_TAGS`` consume their argument and
    produce nothing. Arguments beyond the descriptor's length are ignored.

    Booleans follow truthiness (``decode("b", 0)`` is ``false``) and CHAR also
    accepts an integer code point.

    Args:
        descriptor: Type descriptor, one character per argument.
        *args: The values described by ``descriptor``.

    Returns:
        The decoded LogValue objects in order. Empty for an empty descriptor.

    Raises:
        ValueError: If ``descriptor`` has more characters than ``args``.

    Example:
        >>> [v.render() for v in decode("sib", "answer", 42, True)]
        ['answer', '42', 'true']
        >>> [v.render() for v in decode("sxi", "a", object(), 7)]
        ['a', '7']
    """
    if len(descriptor) > len(args):
        raise ValueError(
            f"descriptor {descriptor!r} needs {len(descriptor)} arguments, "
            f"got {len(args)}"
        )

    decoded: List[LogValue] = []
    for tag_char, arg in zip(descriptor, args):
        tag = DESCRIPTOR_TAGS.get(tag_char)
        if tag is None:
            continue
        if tag is ValueType.BOOL:
            decoded.append(LogValue.boolean(arg))
        elif tag is ValueType.CHAR and isinstance(arg, int) and not isinstance(arg, bool):
            decoded.append(LogValue.char(chr(arg)))
        else:
            decoded.append(LogValue(tag, arg))
    return decoded
