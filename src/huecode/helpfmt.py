"""Custom argparse help formatter.

This combines:
- ArgumentDefaultsHelpFormatter → automatically appends default values to help text.
- RawTextHelpFormatter → preserves newlines and indentation in help strings.

Section headings are styled through huecode itself.
"""

from __future__ import annotations

import argparse


class ColorDefaultsFormatter(
    argparse.ArgumentDefaultsHelpFormatter,
    argparse.RawTextHelpFormatter,
):
    """Argparse help formatter with default values and colored headings.

    - Shows default values for options.
    - Preserves line breaks in help descriptions.
    - Sets `max_help_position` (option column width) and `width` (wrap length).
    """

    def __init__(self, *a, **k):
        k.setdefault("max_help_position", 30)
        k.setdefault("width", 100)
        super().__init__(*a, **k)

    def start_section(self, heading):
        """Add color to section headers."""
        from .cli.colors import section_header

        if heading:
            heading = section_header(heading)
        return super().start_section(heading)
