"""Tests for the run renderer."""

import pytest

from sani.formatting.codes import apply_codes
from sani.formatting.ir import TextRun, TextStyle
from sani.formatting.renderer import RunRenderer, render_runs
from sani.formatting.scanner import InlineScanner

NONE = TextStyle.NONE
B = TextStyle.BOLD
I = TextStyle.ITALIC  # noqa: E741
S = TextStyle.STRIKETHROUGH


class TestRunRenderer:
    """Tests for the RunRenderer class."""

    @pytest.fixture
    def renderer(self) -> RunRenderer:
        """Create a renderer instance."""
        return RunRenderer()

    def test_empty_runs(self, renderer: RunRenderer):
        """Test that no runs render to an empty string."""
        assert renderer.render([]) == ""

    def test_unstyled_runs(self, renderer: RunRenderer):
        """Test unstyled runs are concatenated without codes."""
        runs = [TextRun("lorem ipsum "), TextRun(r"\dolor sit amet")]
        assert renderer.render(runs) == r"lorem ipsum \dolor sit amet"

    @pytest.mark.parametrize(
        "runs,expected",
        [
            (
                [("lorem", B), (" ipsum", NONE)],
                "\x1b[1mlorem\x1b[22m ipsum",
            ),
            (
                [("lorem ", NONE), ("ipsum", B), (" dolor", NONE)],
                "lorem \x1b[1mipsum\x1b[22m dolor",
            ),
            (
                [("lorem ", NONE), ("ipsum", B)],
                "lorem \x1b[1mipsum\x1b[22m",
            ),
            (
                [("lorem", I), (" ipsum", NONE)],
                "\x1b[3mlorem\x1b[23m ipsum",
            ),
            (
                [("lorem ", NONE), (" ipsum ", I), (" dolor", NONE)],
                "lorem \x1b[3m ipsum \x1b[23m dolor",
            ),
            (
                [("lorem ", NONE), ("ipsum", I)],
                "lorem \x1b[3mipsum\x1b[23m",
            ),
            (
                [("lorem", S), (" ipsum", NONE)],
                "\x1b[9mlorem\x1b[29m ipsum",
            ),
            (
                [("lorem ", NONE), ("ipsum", S), (" dolor", NONE)],
                "lorem \x1b[9mipsum\x1b[29m dolor",
            ),
            (
                [("lorem ", NONE), ("ipsum", S)],
                "lorem \x1b[9mipsum\x1b[29m",
            ),
        ],
    )
    def test_single_style_positions(self, renderer: RunRenderer, runs, expected):
        """Test each style at the start, middle and end of a paragraph."""
        assert renderer.render([TextRun(text, style) for text, style in runs]) == expected

    def test_two_overlapping_styles(self, renderer: RunRenderer):
        runs = [
            TextRun("lorem ", B),
            TextRun("ipsum", B | I),
            TextRun(" dolor", I),
        ]
        assert renderer.render(runs) == "\x1b[1mlorem \x1b[3mipsum\x1b[22m dolor\x1b[23m"

    def test_enclosed_styles(self, renderer: RunRenderer):
        """Test the inner style is closed before the outer one."""
        runs = [
            TextRun("lorem ", B),
            TextRun("ipsum", B | I),
            TextRun(" dolor", B),
        ]
        assert renderer.render(runs) == "\x1b[1mlorem \x1b[3mipsum\x1b[23m dolor\x1b[22m"

    def test_enclosed_and_overlapping_styles(self, renderer: RunRenderer):
        runs = [
            TextRun("lorem ", B),
            TextRun("ipsum", B | I),
            TextRun(" ", B),
            TextRun("dolor", B | S),
            TextRun(" sit amet", S),
        ]
        assert renderer.render(runs) == (
            "\x1b[1mlorem \x1b[3mipsum\x1b[23m \x1b[9mdolor\x1b[22m sit amet\x1b[29m"
        )

    def test_repeated_style_not_reemitted(self, renderer: RunRenderer):
        """Test consecutive runs with the same style share one start code."""
        runs = [TextRun("lorem ", B), TextRun("ipsum", B)]
        assert renderer.render(runs) == "\x1b[1mlorem ipsum\x1b[22m"

    def test_unclosed_style_is_closed(self, renderer: RunRenderer):
        """Test a style left on by the last run is closed at the end."""
        runs = [TextRun("lorem", B | I | S)]
        assert renderer.render(runs).endswith("\x1b[22m\x1b[23m\x1b[29m")

    def test_accepts_generators(self, renderer: RunRenderer):
        runs = (TextRun(text, B) for text in ("lorem", "ipsum"))
        assert renderer.render(runs) == "\x1b[1mloremipsum\x1b[22m"

    def test_module_level_render_runs(self):
        assert render_runs([TextRun("lorem", I)]) == "\x1b[3mlorem\x1b[23m"


class TestScanThenRender:
    """Tests for scanning followed by rendering."""

    @pytest.mark.parametrize(
        "markup,expected",
        [
            ("**lorem** ipsum", "\x1b[1mlorem\x1b[22m ipsum"),
            ("lorem\nipsum", "lorem ipsum"),
            (
                "**lorem *ipsum* dolor**",
                "\x1b[1mlorem \x1b[3mipsum\x1b[23m dolor\x1b[22m",
            ),
            ("~lorem~ ipsum", "~lorem~ ipsum"),
        ],
    )
    def test_markup_renders(self, markup, expected):
        runs = InlineScanner().scan(markup)
        assert RunRenderer().render(runs) == expected

    @pytest.mark.parametrize(
        "markup",
        [
            "**unclosed bold",
            "*a **b ~~c",
            "~~a *b** c~~ d*",
            "***",
            "plain",
            "",
        ],
    )
    def test_output_always_ends_unstyled(self, markup):
        """Test replaying the rendered codes always ends unstyled."""
        output = RunRenderer().render(InlineScanner().scan(markup))
        assert apply_codes(NONE, output) == NONE
