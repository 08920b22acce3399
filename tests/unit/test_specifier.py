import pytest

from bracefmt._core.config import SyntaxConfig
from bracefmt._core.flags import Align, Base, FormatFlags
from bracefmt._core.specifier import parse_specifiers


class TestSingleSpecifiers:
    def test_empty(self):
        parsed = parse_specifiers("{}", 1)
        assert parsed.flags == FormatFlags()
        assert parsed.cursor == 2

    @pytest.mark.parametrize(
        "interior, expected",
        [
            ("#", FormatFlags(base=Base.HEXADECIMAL)),
            ("~", FormatFlags(base=Base.OCTAL)),
            ("-", FormatFlags(align=Align.LEFT)),
            (".2", FormatFlags(precision=2)),
            (".0", FormatFlags(precision=0)),
            ("5", FormatFlags(width=5)),
            ("12", FormatFlags(width=12)),
            ("5*", FormatFlags(width=5, fill="*")),
            ("10 ", FormatFlags(width=10)),
        ],
    )
    def test_flags(self, interior, expected):
        text = "{" + interior + "}"
        parsed = parse_specifiers(text, 1)
        assert parsed.flags == expected
        assert parsed.cursor == len(text)

    def test_precision_without_digits(self):
        """A lone precision marker is ignored"""
        parsed = parse_specifiers("{.}", 1)
        assert parsed.flags == FormatFlags()
        assert parsed.cursor == 3

    def test_precision_without_digits_then_other(self):
        parsed = parse_specifiers("{.#}", 1)
        assert parsed.flags == FormatFlags(base=Base.HEXADECIMAL)


class TestCombinations:
    def test_width_fill_left(self):
        parsed = parse_specifiers("{5*-}", 1)
        assert parsed.flags == FormatFlags(align=Align.LEFT, width=5, fill="*")

    def test_fill_can_be_a_marker(self):
        """The character after the width is always the fill"""
        parsed = parse_specifiers("{5-}", 1)
        assert parsed.flags == FormatFlags(width=5, fill="-")

    def test_fill_can_be_a_digit_after_run(self):
        """The digit run is maximal so a digit is never the fill"""
        parsed = parse_specifiers("{50}", 1)
        assert parsed.flags == FormatFlags(width=50)

    def test_last_base_wins(self):
        parsed = parse_specifiers("{#~}", 1)
        assert parsed.flags.base == Base.OCTAL

        parsed = parse_specifiers("{~#}", 1)
        assert parsed.flags.base == Base.HEXADECIMAL

    def test_later_width_overrides(self):
        parsed = parse_specifiers("{3x8y}", 1)
        assert parsed.flags == FormatFlags(width=8, fill="y")

    def test_everything(self):
        parsed = parse_specifiers("{-.3#8_}", 1)
        assert parsed.flags == FormatFlags(
            base=Base.HEXADECIMAL, align=Align.LEFT, width=8, fill="_", precision=3
        )

    def test_space_is_not_a_specifier(self):
        assert parse_specifiers("{-#.3 8_}", 1) is None

    def test_precision_then_width(self):
        parsed = parse_specifiers("{.2#6.}", 1)
        assert parsed.flags == FormatFlags(
            base=Base.HEXADECIMAL, precision=2, width=6, fill="."
        )


class TestCursor:
    def test_stops_at_first_close(self):
        text = "a{#}b{}"
        parsed = parse_specifiers(text, 2)
        assert parsed.cursor == 4
        assert text[parsed.cursor :] == "b{}"

    def test_unterminated(self):
        text = "{#"
        parsed = parse_specifiers(text, 1)
        assert parsed.flags == FormatFlags(base=Base.HEXADECIMAL)
        assert parsed.cursor == len(text)

    def test_unterminated_width(self):
        text = "{12"
        parsed = parse_specifiers(text, 1)
        assert parsed.flags == FormatFlags(width=12)
        assert parsed.cursor == len(text)

    def test_nothing_after_open(self):
        parsed = parse_specifiers("{", 1)
        assert parsed.flags == FormatFlags()
        assert parsed.cursor == 1


class TestInvalid:
    @pytest.mark.parametrize("interior", ["%", "x", " ", "#%", "5*%", ".2s", "{"])
    def test_unknown_character(self, interior):
        assert parse_specifiers("{" + interior + "}", 1) is None

    def test_non_ascii_digit(self):
        """Only 0-9 start a width"""
        assert parse_specifiers("{²}", 1) is None

    def test_width_too_long(self):
        assert parse_specifiers("{" + "1" * 5000 + "}", 1) is None

    def test_precision_too_long(self):
        assert parse_specifiers("{." + "1" * 5000 + "}", 1) is None

    def test_width_too_large(self):
        assert parse_specifiers("{" + "9" * 30 + "}", 1) is None


class TestCustomSyntax:
    def test_custom_markers(self):
        syntax = SyntaxConfig(open="<", close=">", hexadecimal="x", left="L")
        parsed = parse_specifiers("<xL3>", 1, syntax)
        assert parsed.flags == FormatFlags(
            base=Base.HEXADECIMAL, align=Align.LEFT, width=3
        )

    def test_default_markers_unknown_in_custom_syntax(self):
        syntax = SyntaxConfig(open="<", close=">", hexadecimal="x", left="L")
        assert parse_specifiers("<#>", 1, syntax) is None

    def test_custom_close(self):
        syntax = SyntaxConfig(open="[", close="]", hexadecimal="h")
        parsed = parse_specifiers("[h4]]", 1, syntax)
        assert parsed.flags == FormatFlags(base=Base.HEXADECIMAL, width=4)
        assert parsed.cursor == 4
