"""Styled fragments for CLI help and messages.

Everything goes through the default styler, so ``--no-color``, ``--level``
and the config file apply to help output as well. Text that ends up with no
attributes is returned untouched, without a trailing reset.
"""

from ..styler import RESET, default_styler


def _styled(text: str, directives: str) -> str:
    prefix = default_styler.compile(directives)
    return f"{prefix}{text}{RESET}" if prefix else text


def section_header(text: str) -> str:
    """Format a section header with color."""
    return _styled(text, "bold cyan")


def subsection_header(text: str) -> str:
    """Format a subsection header with color."""
    return _styled(text, "bold yellow")


def example(text: str) -> str:
    """Format example text with color."""
    return _styled(text, "green")


def error_text(text: str) -> str:
    return _styled(text, "bold red")


def dim_text(text: str) -> str:
    """Format secondary text with dim color."""
    return _styled(text, "dim")
