"""Rich spinner renderer for long-running steps."""
import sys

from rich.console import Console
from rich.markup import escape
from rich.status import Status
from rich.text import Text

from eazypm.utils.logging import logger, restore_stderr_sink, swap_to_rich_sink

from .ui import console as default_console


class SpinnerRenderer:
    """Spinner that follows orchestrator events (ReinstallObserver).

    Each finished step prints a dim "[i/n] name (elapsed)" line above the
    spinner. In non-TTY mode nothing animates; the step lines and final
    result are still printed.
    """

    def __init__(self, text: str, console: Console | None = None):
        self.console = console or default_console
        self.text = text
        self.is_tty = sys.stdout.isatty()
        self._status: Status | None = None
        self._log_handler_id: int | None = None
        self._step = (1, 1)

    def _log_message(self, message) -> None:
        """Loguru sink printing above the spinner."""
        self.console.print(Text.from_ansi(str(message).rstrip("\n")))

    def start(self) -> "SpinnerRenderer":
        if self.is_tty and self._status is None:
            self._status = self.console.status(Text(self.text), spinner="dots")
            self._status.start()
            self._log_handler_id = swap_to_rich_sink(self._log_message)
        return self

    def stop(self) -> None:
        if self._status is not None:
            self._status.stop()
            self._status = None
            restore_stderr_sink(self._log_handler_id)
            self._log_handler_id = None

    def update(self, text: str) -> None:
        self.text = text
        if self._status is not None:
            self._status.update(Text(text))

    def succeed(self, text: str) -> None:
        self.stop()
        self.console.print(f"[success]\\[OK][/success] {escape(text)}", highlight=False)

    def fail(self, text: str) -> None:
        self.stop()
        self.console.print(f"[error]\\[FAILED][/error] {escape(text)}", highlight=False)

    def __enter__(self) -> "SpinnerRenderer":
        return self.start()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()

    # ReinstallObserver implementation

    def on_step_start(self, name: str, index: int, total: int) -> None:
        self._step = (index, total)
        self.update(name)

    def on_step_complete(self, name: str, elapsed: float) -> None:
        index, total = self._step
        line = Text(f"  [{index}/{total}] {name} ({elapsed:.1f}s)", style="dim")
        self.console.print(line, highlight=False)

    def on_step_failed(self, name: str, error: str, exit_code: int) -> None:
        # Caller reports the failure once; just clear the spinner line
        logger.debug(f"Step failed: {name} ({error})")
        self.stop()
