"""
Interactive prompt collaborator.

Asks the user a select / confirm / input question on the terminal. Used by
surrounding workflow (the CLI's destructive commands); the reducer never
depends on it.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, TextIO

from rich.console import Console
from rich.prompt import Confirm, IntPrompt, Prompt

SELECT = "select"
CONFIRM = "confirm"
INPUT = "input"

PROMPT_TYPES = (SELECT, CONFIRM, INPUT)


@dataclass(frozen=True)
class PromptResult:
    """
    Outcome of one question.

    Fields:
        question: Question as asked
        type: select, confirm or input
        options: Choices offered (select only)
        answer: Answer text ("yes"/"no" for confirm), None when cancelled
        cancelled: True when dismissed, interrupted or not askable
        error: Set when the question could not be asked at all
    """
    question: str
    type: str
    options: List[str] = field(default_factory=list)
    answer: Optional[str] = None
    cancelled: bool = False
    error: Optional[str] = None

    @property
    def text(self) -> str:
        if self.error:
            return f"Error: {self.error}"
        if self.cancelled:
            return "User cancelled / dismissed the prompt"
        return f"User responded: {self.answer}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "question": self.question,
            "type": self.type,
            "options": list(self.options),
            "answer": self.answer,
            "cancelled": self.cancelled,
        }


def ask(
    question: str,
    kind: str,
    options: Optional[Sequence[str]] = None,
    placeholder: Optional[str] = None,
    console: Optional[Console] = None,
    interactive: Optional[bool] = None,
    stream: Optional[TextIO] = None,
) -> PromptResult:
    """
    Ask one question.

    Args:
        question: Question text
        kind: One of PROMPT_TYPES
        options: Choices for select (ignored otherwise)
        placeholder: Default answer for input (ignored otherwise)
        console: Console to prompt on (default: new stderr console)
        interactive: Override terminal detection
        stream: Read answers from this stream instead of stdin

    Returns:
        PromptResult; never raises for user-side cancellation
    """
    console = console or Console(stderr=True)
    opts = list(options or [])
    if interactive is None:
        interactive = console.is_terminal

    if kind not in PROMPT_TYPES:
        return PromptResult(question, kind, opts, cancelled=True, error=f"unknown prompt type: {kind}")
    if not interactive:
        return PromptResult(
            question, kind, opts, cancelled=True, error="no UI available (non-interactive mode)"
        )
    if kind == SELECT and not opts:
        return PromptResult(
            question, SELECT, [], cancelled=True, error="'select' type requires options array"
        )

    try:
        if kind == SELECT:
            console.print(f"[bold]{question}[/bold]")
            for pos, option in enumerate(opts, start=1):
                console.print(f"  [cyan]{pos}[/cyan]. {option}")
            choice = IntPrompt.ask(
                "Choice",
                choices=[str(pos) for pos in range(1, len(opts) + 1)],
                console=console,
                stream=stream,
            )
            answer = opts[choice - 1]
        elif kind == CONFIRM:
            answer = "yes" if Confirm.ask(question, console=console, stream=stream) else "no"
        else:
            answer = Prompt.ask(question, default=placeholder or "", console=console, stream=stream)
    except (KeyboardInterrupt, EOFError):
        return PromptResult(question, kind, opts, answer=None, cancelled=True)

    return PromptResult(question, kind, opts, answer=answer)
