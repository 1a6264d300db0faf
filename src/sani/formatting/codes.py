"""ANSI SGR codes for text styles and the transitions between them."""

import re

from sani.formatting.ir import CANONICAL_ORDER, TextStyle

ESC = "\x1b"

START_CODES: dict[TextStyle, str] = {
    TextStyle.BOLD: f"{ESC}[1m",
    TextStyle.ITALIC: f"{ESC}[3m",
    TextStyle.STRIKETHROUGH: f"{ESC}[9m",
}

END_CODES: dict[TextStyle, str] = {
    TextStyle.BOLD: f"{ESC}[22m",
    TextStyle.ITALIC: f"{ESC}[23m",
    TextStyle.STRIKETHROUGH: f"{ESC}[29m",
}

SGR_PATTERN = re.compile(re.escape(ESC) + r"\[\d+m")


def start_codes(style: TextStyle) -> str:
    """Codes that switch on every attribute in ``style``."""
    return "".join(START_CODES[attribute] for attribute in style.attributes)


def end_codes(style: TextStyle) -> str:
    """Codes that switch off every attribute in ``style``."""
    return "".join(END_CODES[attribute] for attribute in style.attributes)


def transition_codes(previous: TextStyle, current: TextStyle) -> str:
    """Return the codes that move a terminal from ``previous`` to ``current``.

    Attributes that are discontinued are closed first, then attributes
    that are new are opened. Attributes common to both styles emit
    nothing, so ``transition_codes(style, style)`` is always empty.

    Args:
        previous: Style active before the transition
        current: Style that should be active after it

    Returns:
        End codes followed by start codes, each in canonical order
    """
    discontinued = previous & ~current
    introduced = current & ~previous
    return end_codes(discontinued) + start_codes(introduced)


def apply_codes(style: TextStyle, codes: str) -> TextStyle:
    """Replay every style code found in ``codes`` on top of ``style``.

    Sequences that are not one of the style codes are ignored.
    """
    for match in SGR_PATTERN.finditer(codes):
        sequence = match.group()
        for attribute in CANONICAL_ORDER:
            if sequence == START_CODES[attribute]:
                style |= attribute
            elif sequence == END_CODES[attribute]:
                style &= ~attribute
    return style
