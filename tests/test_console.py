from _engine.console import print_banner, print_literal
from conftest import printed_lines


class TestPrintBanner:

    def test_short_title_uses_minimum_width(self, record_console):
        print_banner("AI Suggested Commit Message", record_console)

        rule, middle, closing = printed_lines(record_console)
        assert rule == "=" * 60
        assert closing == rule
        assert middle == " " * 16 + "AI Suggested Commit Message"

    def test_long_title_uses_maximum_width(self, record_console):
        print_banner("x" * 95, record_console)

        assert printed_lines(record_console)[0] == "=" * 100

    def test_medium_title_sized_to_fit(self, record_console):
        print_banner("t" * 70, record_console)

        rule, middle, _ = printed_lines(record_console)
        assert rule == "=" * 78
        assert middle == " " * 4 + "t" * 70


def test_print_literal_keeps_brackets(record_console):
    print_literal("[red]not markup[/red]", record_console)
    assert printed_lines(record_console) == ["[red]not markup[/red]"]
