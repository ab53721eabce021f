"""Terminal output helpers for the CLI."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/events2md/cli/output.py
import sys
from typing import IO, Optional

from events2md.exceptions import DependencyError


def check_rich_available() -> bool:
    """Check if the Rich library is available.

    Returns
    -------
    bool
        True if Rich is available, False otherwise

    """
    try:
        import rich  # noqa: F401

        return True
    except ImportError:
        return False


def print_markdown(markdown: str, preview: bool = False, stream: Optional[IO[str]] = None) -> None:
    """Print rendered Markdown, optionally as a Rich terminal preview.

    Parameters
    ----------
    markdown : str
        Markdown text
    preview : bool, default False
        Display the formatted document with Rich instead of the source text
    stream : IO[str], optional
        Destination; defaults to sys.stdout

    Raises
    ------
    DependencyError
        If a preview is requested and Rich is not installed

    """
    target = stream or sys.stdout
    if not preview:
        target.write(markdown)
        if markdown and not markdown.endswith("\n"):
            target.write("\n")
        return

    if not check_rich_available():
        raise DependencyError(
            feature_name="Markdown preview",
            missing_packages=[("rich", "")],
            install_command="pip install events2md[rich]",
        )

    from rich.console import Console
    from rich.markdown import Markdown

    Console(file=target).print(Markdown(markdown))
