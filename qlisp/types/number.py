from __future__ import annotations


class Number:
    __slots__ = ("value",)
    __match_args__ = ("value",)
    type_name = "Number"

    def __init__(self, value: float):
        self.value = float(value)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Number) and self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __repr__(self):
        return f"Number({self.value!r})"

    def copy(self) -> Number:
        return Number(self.value)
