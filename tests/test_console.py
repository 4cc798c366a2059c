import pytest

from magiceden_mint.console import Console


def test_ask_strips_answer():
    console = Console(lambda question: f"  {question}42 \n")

    assert console.ask("n=") == "n=42"


def test_closed_console_refuses_input():
    with Console(lambda question: "1") as console:
        assert console.ask("?") == "1"

    assert console.closed
    with pytest.raises(RuntimeError):
        console.ask("?")
