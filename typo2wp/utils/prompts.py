from __future__ import annotations

from typing import Callable


def yesno(prompt: str, input_fn: Callable[[str], str] = input) -> bool:
    """
    Ask the operator a yes/no question, defaulting to no.

    Answers starting with ``y`` accept, answers starting with ``n`` or an
    empty line decline; anything else repeats the question.  Running out
    of input (EOF) counts as no.
    """
    while True:
        try:
            answer = input_fn(f"{prompt} [yN] ").strip()
        except EOFError:
            return False
        if answer[:1].lower() == "y":
            return True
        if answer == "" or answer[:1].lower() == "n":
            return False
