"""Rendering of Golp values back into Lisp notation."""

from io import StringIO

from golp import LispValue
from golp.types.lambda_fn import Lambda
from golp.types.nil import NilType
from golp.types.symbol import Symbol


def _write(obj: LispValue, buffer: StringIO) -> None:
    match obj:
        case bool():
            buffer.write("true" if obj else "false")
        case int() | float():
            buffer.write(repr(obj))
        case Symbol():
            buffer.write(obj.id)
        case NilType():
            buffer.write("nil")
        case list():
            buffer.write("(")
            for i, item in enumerate(obj):
                if i:
                    buffer.write(" ")
                _write(item, buffer)
            buffer.write(")")
        case Lambda():
            buffer.write("(lambda ")
            _write(list(obj.formals), buffer)
            buffer.write(" ")
            _write(obj.body, buffer)
            buffer.write(")")
        case _ if callable(obj):
            buffer.write(f"#<builtin {getattr(obj, 'lisp_name', getattr(obj, '__name__', '?'))}>")
        case _:
            buffer.write(repr(obj))


def to_lisp_string(obj: LispValue) -> str:
    """Render `obj` the way it would be written in source."""
    with StringIO() as buffer:
        _write(obj, buffer)
        return buffer.getvalue()
