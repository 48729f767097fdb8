"""
Terminal prompts built on Rich. Ctrl+C or end of input at any prompt is
reported to the selection flow as ``Cancelled``.
"""

from collections.abc import Sequence

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm, IntPrompt, Prompt
from rich.table import Table

from ytpick.core.prompts import Cancelled, Choice


class RichPrompter:
    """Asks the selection flow's questions on a Rich console."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def _print_options(
        self, message: str, labels: Sequence[str], default: int | None = None
    ) -> None:
        table = Table(
            title=f"[bold]{escape(message)}[/bold]",
            title_justify="left",
            show_header=False,
            box=box.SIMPLE,
            padding=(0, 1),
        )
        table.add_column(style="dim", justify="right")
        table.add_column()
        for i, label in enumerate(labels):
            text = escape(label)
            if i == default:
                text = f"[bold cyan]{text}[/bold cyan]"
            table.add_row(str(i + 1), text)
        self.console.print(table)

    def select(
        self, message: str, labels: Sequence[str], default: int = 0
    ) -> Choice[int] | Cancelled:
        self._print_options(message, labels, default)
        try:
            answer = IntPrompt.ask(
                "Select #",
                console=self.console,
                choices=[str(i) for i in range(1, len(labels) + 1)],
                show_choices=False,
                default=default + 1,
            )
        except (KeyboardInterrupt, EOFError):
            return Cancelled()
        return Choice(answer - 1)

    def select_many(
        self, message: str, labels: Sequence[str]
    ) -> Choice[list[int]] | Cancelled:
        self._print_options(message, labels)
        while True:
            try:
                raw = Prompt.ask(
                    "Numbers separated by commas [dim](blank for none)[/dim]",
                    console=self.console,
                    default="",
                    show_default=False,
                )
            except (KeyboardInterrupt, EOFError):
                return Cancelled()

            picked = parse_indexes(raw, len(labels))
            if picked is not None:
                return Choice(picked)
            self.console.print(
                f"[prompt.invalid]Please enter numbers between 1 and {len(labels)}"
            )

    def text(self, message: str, default: str = "") -> Choice[str] | Cancelled:
        try:
            answer = Prompt.ask(escape(message), console=self.console, default=default)
        except (KeyboardInterrupt, EOFError):
            return Cancelled()
        return Choice(answer)

    def confirm(self, message: str, default: bool) -> Choice[bool] | Cancelled:
        try:
            answer = Confirm.ask(escape(message), console=self.console, default=default)
        except (KeyboardInterrupt, EOFError):
            return Cancelled()
        return Choice(answer)


def parse_indexes(raw: str, count: int) -> list[int] | None:
    """
    Parses ``"1, 3"`` into zero-based indexes ``[0, 2]``, dropping duplicates.
    Returns None if any entry is not a number between 1 and ``count``.
    """
    picked: list[int] = []
    for part in raw.replace(" ", ",").split(","):
        if not part:
            continue
        if not part.isdigit() or not 1 <= int(part) <= count:
            return None
        if (index := int(part) - 1) not in picked:
            picked.append(index)
    return picked
