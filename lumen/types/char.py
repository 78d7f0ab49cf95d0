from __future__ import annotations

NAMED_CHARS: dict[str, str] = {
    "space": " ",
    "newline": "\n",
    "tab": "\t",
    "return": "\r",
}

_CHAR_NAMES: dict[str, str] = {v: k for k, v in NAMED_CHARS.items()}


class Char:
    """A single character, distinct from a one-character string."""

    __slots__ = ("value",)

    def __init__(self, value: str):
        if len(value) != 1:
            raise ValueError(f"Char needs exactly one character, got {value!r}")
        self.value = value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Char) and self.value == other.value

    def __hash__(self) -> int:
        return hash(("char", self.value))

    def __repr__(self):
        return f"Char({self.value!r})"

    def __str__(self):
        return "\\" + _CHAR_NAMES.get(self.value, self.value)
