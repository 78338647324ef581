"""콘솔 입력 도우미.

Input helpers that re-prompt until the answer is usable.
"""

from collections.abc import Callable, Sequence
from datetime import date, datetime

from shifts_logger.utils.datetimes import parse_date, parse_datetime

Validator = Callable[[str], str | None]

# Answer that clears an optional field instead of keeping its current value
CLEAR: str = "-"


class Prompter:
    """Reads answers through injectable input/output functions.

    Args:
        input_fn: Returns one line for a prompt (defaults to `input`)
        out: Writes one line (defaults to `print`)
    """

    def __init__(
        self,
        input_fn: Callable[[str], str] = input,
        out: Callable[[str], None] = print,
    ) -> None:
        self.input_fn = input_fn
        self.out = out

    def ask(self, label: str) -> str:
        return self.input_fn(f"{label}: ").strip()

    def text(
        self,
        label: str,
        required: bool = True,
        default: str | None = None,
        validator: Validator | None = None,
    ) -> str | None:
        """Ask for a string.

        A blank answer returns `default` when one is given, None for optional
        fields, and re-prompts for required ones. On optional fields `-`
        returns None even when there is a default.
        """
        suffix = f" [{default}]" if default else ""
        if default and not required:
            suffix = f" [{default}, {CLEAR} to clear]"
        while True:
            answer = self.ask(f"{label}{suffix}")
            if answer == CLEAR and not required:
                return None
            if not answer:
                if default is not None:
                    return default
                if not required:
                    return None
                self.out(f"{label} is required.")
                continue
            error = validator(answer) if validator else None
            if error:
                self.out(error)
                continue
            return answer

    def integer(
        self,
        label: str,
        minimum: int = 1,
        required: bool = True,
        default: int | None = None,
    ) -> int | None:
        suffix = f" [{default}]" if default is not None else ""
        while True:
            answer = self.ask(f"{label}{suffix}")
            if not answer:
                if default is not None:
                    return default
                if not required:
                    return None
                self.out(f"{label} is required.")
                continue
            try:
                value = int(answer)
            except ValueError:
                self.out("Please enter a whole number.")
                continue
            if value < minimum:
                self.out(f"Please enter a number of at least {minimum}.")
                continue
            return value

    def timestamp(self, label: str, default: datetime | None = None) -> datetime:
        """Ask for a date and time (dd-MM-yyyy HH:mm, dd/MM/yyyy HH:mm or ISO)."""
        suffix = f" [{default.strftime('%d-%m-%Y %H:%M')}]" if default else ""
        while True:
            answer = self.ask(f"{label} (dd-MM-yyyy HH:mm){suffix}")
            if not answer and default is not None:
                return default
            try:
                return parse_datetime(answer)
            except ValueError as exc:
                self.out(str(exc))

    def day(self, label: str, required: bool = True) -> date | None:
        while True:
            answer = self.ask(f"{label} (dd-MM-yyyy)")
            if not answer and not required:
                return None
            try:
                return parse_date(answer)
            except ValueError as exc:
                self.out(str(exc))

    def confirm(self, label: str) -> bool:
        return self.ask(f"{label} (y/n)").lower() in ("y", "yes")

    def choose(self, title: str, options: Sequence[tuple[str, str]]) -> str:
        """Show numbered options and return the chosen key."""
        keys = {key for key, _ in options}
        while True:
            self.out("")
            self.out(title)
            for key, text in options:
                self.out(f"  {key}. {text}")
            answer = self.ask("Choose an option")
            if answer in keys:
                return answer
            self.out("Invalid selection.")
