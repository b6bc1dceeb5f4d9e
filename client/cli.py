"""
Interactive Terminal

A line-oriented terminal for a running termweb server, behaving like the
browser front end: the prompt follows the shared working directory, errors
are shown in red, and ``clear`` clears the screen.

Usage:
    # Connect to a local server
    termweb

    # Connect elsewhere
    termweb --url http://10.0.0.5:3000

Up and down arrows walk the commands sent in this session and Ctrl-L clears
the screen, when the platform provides ``readline``. Press Ctrl-D or Ctrl-C
to leave.
"""

from typing import Any, Callable, Optional

import typer
from rich.console import Console
from rich.markup import escape

from client.client import DEFAULT_BASE_URL, ShellClient
from client.exceptions import TermwebClientError

try:
    import readline
except ImportError:
    readline = None

__all__ = ["main", "app", "TerminalSession", "configure_line_editing"]

UNREACHABLE_MESSAGE = "Failed to reach the server."
FORM_FEED = "\x0c"

app = typer.Typer(
    name="termweb",
    help="Interactive terminal for a termweb server",
    add_completion=False,
)
console = Console()


def format_prompt(cwd: str) -> str:
    """Return the prompt shown before each command."""
    return f"user@termweb:{cwd}$ "


def configure_line_editing(editor: Any) -> None:
    """Set up arrow-key history and Ctrl-L on a readline module.

    Automatic history is turned off; TerminalSession adds each command it
    sends, so blank lines and unsent input never show up under the arrows.

    Args:
        editor: The ``readline`` module (GNU readline or libedit).
    """
    if "libedit" in (editor.__doc__ or ""):
        editor.parse_and_bind("bind ^L ed-clear-screen")
    else:
        editor.parse_and_bind("set editing-mode emacs")
        editor.parse_and_bind(r'"\C-l": clear-screen')
    editor.set_auto_history(False)


class TerminalSession:
    """Drives one interactive terminal against a ShellClient.

    Args:
        client: Client connected to the server.
        console: Where output is written.
        line_editor: A configured ``readline`` module to record history in,
            or None when line editing is unavailable.

    Attributes:
        cwd: Working directory shown in the prompt.
        history: Commands sent during this session, oldest first.
    """

    def __init__(
        self,
        client: ShellClient,
        console: Console,
        line_editor: Any = None,
    ) -> None:
        self.client = client
        self.console = console
        self.line_editor = line_editor
        self.cwd = "/"
        self.history: list[str] = []

    def sync_cwd(self) -> None:
        """Fetch the shared working directory before the first prompt."""
        try:
            self.cwd = self.client.cwd()
        except TermwebClientError:
            self.console.print(UNREACHABLE_MESSAGE, style="red", markup=False)

    def remember(self, command: str) -> None:
        """Record a sent command for arrow-key recall."""
        self.history.append(command)
        if self.line_editor is not None:
            self.line_editor.add_history(command)

    def handle_line(self, line: str) -> None:
        """Send one line to the server and render the response.

        A Ctrl-L typed without line editing arrives as a form feed; it clears
        the screen and is not sent.
        """
        if FORM_FEED in line:
            self.console.clear()
            line = line.replace(FORM_FEED, "")

        command = line.strip()
        if not command:
            return

        self.remember(command)
        try:
            response = self.client.run(command)
        except TermwebClientError:
            self.console.print(UNREACHABLE_MESSAGE, style="red", markup=False)
            return

        self.cwd = response.cwd
        if response.clear:
            self.console.clear()
            return
        if response.output:
            style = "red" if response.status == "error" else None
            self.console.print(response.output, style=style, markup=False, highlight=False)

    def _read_line(self, prompt: str) -> str:
        return self.console.input(escape(prompt))

    def loop(self, read_line: Optional[Callable[[str], str]] = None) -> None:
        """Read and run lines until end of input or interrupt.

        Args:
            read_line: Prompt-and-read function; defaults to the console's
                ``input``.
        """
        read_line = read_line or self._read_line
        self.sync_cwd()
        while True:
            try:
                line = read_line(format_prompt(self.cwd))
            except (EOFError, KeyboardInterrupt):
                self.console.print()
                break
            self.handle_line(line)


@app.command()
def shell(
    url: str = typer.Option(
        DEFAULT_BASE_URL,
        "--url", "-u",
        help="Base URL of the termweb server",
        envvar="TERMWEB_URL",
    ),
    timeout: float = typer.Option(
        30.0,
        "--timeout", "-t",
        help="Request timeout in seconds",
    ),
) -> None:
    """Open an interactive terminal on the shared shell."""
    if readline is not None:
        configure_line_editing(readline)
    with ShellClient(base_url=url, timeout=timeout) as client:
        TerminalSession(client, console, line_editor=readline).loop()


def main() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    main()
