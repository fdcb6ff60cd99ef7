"""Value model for Sprig.

Runtime values are plain Python objects: numbers are ``float``, strings
are ``str`` and booleans are ``bool``. The only value without a native
counterpart is ``nil``, represented by the :data:`NIL` singleton. Values
never reference other values, so sharing them between scopes is safe.
"""

from __future__ import annotations

from typing import Any


class NilVal:
    """Marker object for the Sprig ``nil`` value."""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return 'nil'


NIL = NilVal()


def is_number(value: Any) -> bool:
    # bool is a subclass of int, never of float
    return isinstance(value, float)


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def format_number(x: float) -> str:
    """Render a number the way ``print`` shows it.

    The number is formatted with six fractional digits and then trailing
    zeros and a trailing decimal point are removed, so ``3.0`` becomes
    ``"3"`` and ``3.14`` stays ``"3.14"``. Infinities and NaN come out as
    ``inf``, ``-inf`` and ``nan``.
    """
    text = '%f' % x
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    return text


def to_string(value: Any) -> str:
    """Convert a runtime value to its textual form."""
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float):
        return format_number(value)
    if isinstance(value, str):
        return value
    if isinstance(value, NilVal):
        return 'nil'
    raise TypeError(f"not a Sprig value: {value!r}")


def to_number(value: Any) -> float:
    """Return the numeric interpretation of a value.

    Only numbers have one; strings, booleans and nil all read as ``0``.
    """
    if isinstance(value, float):
        return value
    return 0.0


def type_name(value: Any) -> str:
    """Return the Sprig type name of a runtime value."""
    if isinstance(value, bool):
        return 'Boolean'
    if isinstance(value, float):
        return 'Number'
    if isinstance(value, str):
        return 'String'
    if isinstance(value, NilVal):
        return 'Nil'
    return type(value).__name__
