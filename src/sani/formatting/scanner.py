"""Inline markup scanner for converting paragraph text to styled runs."""

from sani.formatting.ir import TextRun, TextStyle


class InlineScanner:
    """Scan inline markup into an ordered list of styled runs.

    Recognised markup:
    - ``**`` toggles bold
    - ``*`` toggles italic
    - ``~~`` toggles strikethrough (a lone ``~`` is plain text)
    - ``\\`` makes the following character literal
    - a newline is folded into a single space

    Toggles are never validated against each other. An unclosed marker
    keeps its style on until the end of the paragraph.
    """

    ESCAPE = "\\"
    NEWLINE = "\n"
    ASTERISK = "*"
    TILDE = "~"

    def scan(self, text: str) -> list[TextRun]:
        """Convert one paragraph of markup to styled runs.

        Args:
            text: Raw paragraph text

        Returns:
            Runs in source order; no run has empty text
        """
        runs: list[TextRun] = []
        style = TextStyle.NONE
        slice_start = 0
        pos = 0
        end = len(text)

        while pos < end:
            char = text[pos]
            following = text[pos + 1] if pos + 1 < end else None

            if char == self.ESCAPE:
                runs.append(TextRun(text[slice_start:pos], style))
                if following is None:
                    # Trailing backslash: nothing left to make literal
                    slice_start = end
                    pos = end
                else:
                    slice_start = pos + 1
                    pos += 2
                continue

            if char == self.NEWLINE:
                runs.append(TextRun(text[slice_start:pos] + " ", style))
                slice_start = pos + 1
            elif char == self.ASTERISK:
                runs.append(TextRun(text[slice_start:pos], style))
                if following == self.ASTERISK:
                    style = style.toggle(TextStyle.BOLD)
                    pos += 1
                else:
                    style = style.toggle(TextStyle.ITALIC)
                slice_start = pos + 1
            elif char == self.TILDE and following == self.TILDE:
                runs.append(TextRun(text[slice_start:pos], style))
                style = style.toggle(TextStyle.STRIKETHROUGH)
                pos += 1
                slice_start = pos + 1

            pos += 1

        if slice_start < end:
            runs.append(TextRun(text[slice_start:], style))

        return [run for run in runs if run.text]


def scan(text: str) -> list[TextRun]:
    """Scan ``text`` with a default :class:`InlineScanner`."""
    return InlineScanner().scan(text)
