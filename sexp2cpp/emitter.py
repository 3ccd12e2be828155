from __future__ import annotations


class Emitter:
    """Append-only sink for generated text.

    Fragments are kept in the order they were appended; nothing is escaped,
    indented or reordered.
    """

    def __init__(self) -> None:
        self._fragments: list[str] = []

    def append(self, text: str) -> None:
        self._fragments.append(text)

    @property
    def fragments(self) -> tuple[str, ...]:
        return tuple(self._fragments)

    @property
    def text(self) -> str:
        return "".join(self._fragments)

    def getvalue(self) -> str:
        return self.text

    def __len__(self) -> int:
        return len(self._fragments)
