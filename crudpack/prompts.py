"""Interactive prompt capability.

Every yes/no question and every multiple-choice question CrudPack asks goes
through a ``PromptPort``.  The CLI injects ``RichPrompt`` (or
``DefaultPrompt`` under ``--no-interaction``); tests inject
``ScriptedPrompt``.
"""

from __future__ import annotations

from collections import deque
from typing import Iterable, Protocol, Union

from rich.prompt import Confirm, Prompt

from crudpack.utils import console


class PromptPort(Protocol):
    """The two questions CrudPack can ask."""

    def confirm(self, question: str, default: bool = False) -> bool:
        ...

    def choose_one(self, question: str, options: list[str], default_index: int = 0) -> str:
        ...


class RichPrompt:
    """Blocking terminal prompts backed by ``rich.prompt``."""

    def confirm(self, question: str, default: bool = False) -> bool:
        return Confirm.ask(question, default=default, console=console)

    def choose_one(self, question: str, options: list[str], default_index: int = 0) -> str:
        return Prompt.ask(
            question,
            choices=options,
            default=options[default_index],
            console=console,
        )


class DefaultPrompt:
    """Answers every question with its default.  Used for ``--no-interaction``."""

    def confirm(self, question: str, default: bool = False) -> bool:
        return default

    def choose_one(self, question: str, options: list[str], default_index: int = 0) -> str:
        return options[default_index]


class ScriptedPrompt:
    """Answers from a queue of canned responses and records every question.

    When the queue runs dry the default is returned.  A ``str`` answer to
    ``choose_one`` must be one of the offered options.
    """

    def __init__(self, answers: Iterable[Union[bool, str]] = ()) -> None:
        self.answers: deque[Union[bool, str]] = deque(answers)
        self.questions: list[str] = []

    def confirm(self, question: str, default: bool = False) -> bool:
        self.questions.append(question)
        if not self.answers:
            return default
        return bool(self.answers.popleft())

    def choose_one(self, question: str, options: list[str], default_index: int = 0) -> str:
        self.questions.append(question)
        if not self.answers:
            return options[default_index]
        answer = str(self.answers.popleft())
        if answer not in options:
            raise ValueError(f"Scripted answer {answer!r} is not one of {options}")
        return answer
