from __future__ import annotations

import re
from typing import Any, Sequence

# %[index$][flags][width][.precision][length]conversion
_SPEC_RE = re.compile(
    r"%(?:(?P<index>\d+)\$)?"
    r"(?P<flags>[-+ 0#]*)"
    r"(?P<width>\d+)?"
    r"(?:\.(?P<precision>\d+))?"
    r"(?P<length>hh|h|ll|l|q|z|t|j|L)?"
    r"(?P<conv>[@dDiuUxXoOfFeEgGcCsSaA%])"
)

_CONVERSIONS = {
    "@": "s",
    "s": "s",
    "S": "s",
    "d": "d",
    "D": "d",
    "i": "d",
    "u": "d",
    "U": "d",
    "o": "o",
    "O": "o",
    "c": "c",
    "C": "c",
    "a": "e",
    "A": "E",
}


def format_printf(template: str, args: Sequence[Any]) -> str:
    """
    Substitute `args` into a printf-style template.

    Understands the Foundation-style `%@` object specifier and positional
    `%1$@` references alongside the usual C conversions. A specifier without
    a matching argument is left in the output as written.
    """
    next_arg = 0

    def repl(m: re.Match[str]) -> str:
        nonlocal next_arg
        conv = m.group("conv")
        if conv == "%":
            return "%"

        if m.group("index"):
            idx = int(m.group("index")) - 1
        else:
            idx = next_arg
            next_arg += 1

        if idx < 0 or idx >= len(args):
            return m.group(0)

        py_spec = "%" + m.group("flags")
        if m.group("width"):
            py_spec += m.group("width")
        if m.group("precision") is not None:
            py_spec += "." + m.group("precision")
        py_spec += _CONVERSIONS.get(conv, conv)

        value = args[idx]
        if conv == "@":
            value = str(value)
        return py_spec % (value,)

    return _SPEC_RE.sub(repl, template)
