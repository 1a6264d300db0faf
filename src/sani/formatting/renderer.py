"""Terminal renderer for styled runs."""

from typing import Iterable

from sani.formatting.codes import transition_codes
from sani.formatting.ir import TextRun, TextStyle


class RunRenderer:
    """Render styled runs to text with embedded ANSI style codes.

    Only the difference between consecutive run styles is emitted, and
    any style still active after the last run is closed.
    """

    def render(self, runs: Iterable[TextRun]) -> str:
        """Render runs in order, starting and ending unstyled."""
        parts: list[str] = []
        previous = TextStyle.NONE

        for run in runs:
            parts.append(transition_codes(previous, run.style))
            parts.append(run.text)
            previous = run.style

        # close up any hanging formatting
        parts.append(transition_codes(previous, TextStyle.NONE))

        return "".join(parts)


def render_runs(runs: Iterable[TextRun]) -> str:
    """Render ``runs`` with a default :class:`RunRenderer`."""
    return RunRenderer().render(runs)
