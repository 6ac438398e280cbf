"""Language-level error value.

An Error is an ordinary value: once produced it is never reduced further and
becomes the result of every enclosing S-Expression. The `control` field lets
the `exit` builtin ask the session to stop without the caller having to match
on the message text.
"""

from __future__ import annotations

from qlisp.types.session import SessionControl


class Error:
    __slots__ = ("message", "control")
    __match_args__ = ("message",)
    type_name = "Error"

    def __init__(self, message: str, control: SessionControl = SessionControl.CONTINUE):
        self.message = message
        self.control = control

    @property
    def terminates(self) -> bool:
        return self.control is SessionControl.TERMINATE

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, Error)
            and self.message == other.message
            and self.control is other.control
        )

    def __hash__(self) -> int:
        return hash((self.message, self.control))

    def __repr__(self):
        if self.terminates:
            return f"Error({self.message!r}, control={self.control})"
        return f"Error({self.message!r})"

    def copy(self) -> Error:
        return Error(self.message, self.control)
