from typing import Callable


class Console:
    """The single interactive prompt of a mint run.

    Closing it is idempotent; asking after close is a programming error.
    """

    def __init__(self, reader: Callable[[str], str] = input) -> None:
        self._reader = reader
        self.closed = False

    def __enter__(self) -> "Console":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def ask(self, question: str) -> str:
        if self.closed:
            raise RuntimeError("Console is closed")

        return self._reader(question).strip()

    def close(self) -> None:
        self.closed = True
