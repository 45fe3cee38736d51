"""Tests for the terminfo progress bar."""

import pytest

from conftest import GREEN
from termprogress.config import update_config
from termprogress.exceptions import TerminalIncapableError
from termprogress.progress import terminal_bar
from termprogress.progress.terminal_bar import TerminalProgressBar


def drain(stream):
    value = stream.getvalue()
    stream.seek(0)
    stream.truncate(0)
    return value


class TestConstruction:

    def test_initial_draw_prints_header_and_empty_bar(self, make_resolver, stream):
        TerminalProgressBar("Tests", term=make_resolver(), stream=stream)

        output = stream.getvalue()
        assert output.startswith("Tests\n\n")
        # prefix "0% " + green + "[" is 9 chars, suffix green + "]" is 6
        bar_width = 80 - 9 - 6 - 6
        expected = (
            "<BOL><UP><CE>0% " + GREEN + "[" + "-" * bar_width + GREEN + "]"
            + "\n<BOL><CE>"
        )
        assert output == "Tests\n\n" + expected

    def test_known_width_with_xenl_auto_advances(self, make_resolver, stream):
        bar = TerminalProgressBar("Tests", term=make_resolver(width=80, xn=True), stream=stream)

        assert bar.width == 80
        assert bar.auto_advances
        assert bar.bol == "<BOL>"
        assert bar.xnl == "\n"

    def test_known_width_without_xenl_moves_up_manually(self, make_resolver, stream):
        bar = TerminalProgressBar("Tests", term=make_resolver(width=80, xn=False), stream=stream)

        assert bar.width == 80
        assert not bar.auto_advances
        assert bar.bol == "<UP><BOL>"
        assert bar.xnl == ""

    @pytest.mark.parametrize("xn", [True, False])
    def test_unknown_width_uses_fallback_and_manual_path(self, make_resolver, stream, xn):
        bar = TerminalProgressBar("Tests", term=make_resolver(width=None, xn=xn), stream=stream)

        assert bar.width == 75
        assert bar.bol == "<UP><BOL>"
        assert bar.xnl == ""

    def test_fallback_width_comes_from_config(self, make_resolver, stream):
        update_config(fallback_width=60)
        bar = TerminalProgressBar("Tests", term=make_resolver(width=None), stream=stream)
        assert bar.width == 60

    def test_incapable_terminal_fails_before_output(self, make_resolver, stream):
        term = make_resolver(strings={'bold': '<B>', 'sgr0': '<N>'})

        with pytest.raises(TerminalIncapableError):
            TerminalProgressBar("Tests", term=term, stream=stream)

        assert stream.getvalue() == ""
        # The caller owns the resolver it passed in
        assert not term.is_closed

    def test_single_redraw_capability_is_enough(self, make_resolver, stream):
        TerminalProgressBar("Tests", term=make_resolver(strings={'cr': '\r'}), stream=stream)
        assert stream.getvalue().startswith("Tests\n\n")

    def test_owned_resolver_closed_when_incapable(self, make_resolver, stream, monkeypatch):
        term = make_resolver(strings={})
        monkeypatch.setattr(terminal_bar, "CapabilityResolver", lambda stream: term)

        with pytest.raises(TerminalIncapableError):
            TerminalProgressBar("Tests", stream=stream)

        assert term.is_closed


class TestUpdate:

    def test_halfway_scenario(self, make_resolver, stream):
        bar = TerminalProgressBar("Tests", term=make_resolver(width=80, xn=True), stream=stream)
        drain(stream)

        bar.update(50, "halfway")

        # prefix "50% " + green + "[" is 10 chars, suffix 6, margin 6
        bar_width = 80 - 10 - 6 - 6
        filled = bar_width // 2
        expected = (
            "<BOL><UP><CE>50% " + GREEN + "["
            + "=" * filled + "-" * (bar_width - filled)
            + GREEN + "]" + "\n" + "<BOL><CE>halfway"
        )
        assert stream.getvalue() == expected

    def test_header_printed_exactly_once(self, make_resolver, stream):
        bar = TerminalProgressBar("Tests", term=make_resolver(), stream=stream)
        for percent in range(0, 101, 10):
            bar.update(percent, f"{percent} Testing")

        output = stream.getvalue()
        assert output.count("Tests\n\n") == 1
        assert output.startswith("Tests\n\n")
        assert not bar.is_clear

    def test_fill_split_adds_up_for_every_percent(self, make_resolver, stream):
        bar = TerminalProgressBar("Tests", term=make_resolver(), stream=stream)

        for percent in range(0, 101):
            bar_width, filled = bar.measure(percent)
            assert 0 <= filled <= bar_width
            assert filled + (bar_width - filled) == bar_width
            assert filled == bar_width * percent // 100

    def test_bounds_empty_and_full(self, make_resolver, stream):
        bar = TerminalProgressBar("Tests", term=make_resolver(), stream=stream)

        bar_width, filled = bar.measure(0)
        assert filled == 0
        bar_width, filled = bar.measure(100)
        assert bar_width > 0
        assert filled == bar_width

    def test_full_bar_has_no_empty_cells(self, make_resolver, stream):
        bar = TerminalProgressBar("Tests", term=make_resolver(), stream=stream)
        drain(stream)

        bar.update(100, "done")
        bar_line = stream.getvalue().split("\n")[0]
        assert "-" not in bar_line
        assert "=" in bar_line

    def test_out_of_range_percent_is_shown_but_fill_clamped(self, make_resolver, stream):
        bar = TerminalProgressBar("Tests", term=make_resolver(), stream=stream)
        drain(stream)

        bar.update(150, "")
        over = stream.getvalue()
        bar_width, filled = bar.measure(150)
        assert "150% " in over
        assert filled == bar_width
        assert "=" * bar_width in over

        drain(stream)
        bar.update(-20, "")
        under = stream.getvalue()
        bar_width, filled = bar.measure(-20)
        assert "-20% " in under
        assert filled == 0

    def test_narrow_terminal_gives_empty_bar(self, make_resolver, stream):
        bar = TerminalProgressBar("Tests", term=make_resolver(width=10), stream=stream)

        assert bar.measure(50) == (0, 0)
        bar.update(50, "tiny")
        assert stream.getvalue().endswith("<BOL><CE>tiny")

    def test_unknown_width_stays_at_fallback(self, make_resolver, stream):
        bar = TerminalProgressBar("Tests", term=make_resolver(width=None), stream=stream)
        for percent in (0, 33, 66, 100):
            bar.update(percent, "")
            assert bar.width == 75

    def test_text_written_verbatim(self, make_resolver, stream):
        bar = TerminalProgressBar("Tests", term=make_resolver(), stream=stream)
        drain(stream)

        bar.update(10, "raw \x1b[1mbold\x1b[0m text")
        assert stream.getvalue().endswith("<BOL><CE>raw \x1b[1mbold\x1b[0m text")

    def test_attributes_wrap_the_bar(self, make_resolver, stream):
        strings = {'el': '<CE>', 'cuu1': '<UP>', 'cr': '<BOL>', 'bold': '<B>', 'sgr0': '<N>'}
        bar = TerminalProgressBar("Tests", term=make_resolver(strings=strings), stream=stream)
        drain(stream)

        bar.update(0, "")
        assert "0% " + GREEN + "[<B>" in stream.getvalue()
        assert "<N>" + GREEN + "]<N>" in stream.getvalue()

    def test_flushes_when_terminal_does_not_auto_advance(self, make_resolver, stream):
        bar = TerminalProgressBar("Tests", term=make_resolver(xn=False), stream=stream)
        before = stream.flushes
        bar.update(10, "")
        assert stream.flushes == before + 1

    def test_no_flush_when_terminal_auto_advances(self, make_resolver, stream):
        bar = TerminalProgressBar("Tests", term=make_resolver(xn=True), stream=stream)
        bar.update(10, "")
        assert stream.flushes == 0

    def test_manual_path_omits_line_separator(self, make_resolver, stream):
        bar = TerminalProgressBar("Tests", term=make_resolver(xn=False), stream=stream)
        drain(stream)

        bar.update(10, "x")
        output = stream.getvalue()
        assert "\n" not in output
        assert output.startswith("<UP><BOL><UP><CE>")
        assert output.endswith("]<UP><BOL><CE>x")


class TestClose:

    def test_close_leaves_passed_resolver_open(self, make_resolver, stream):
        term = make_resolver()
        bar = TerminalProgressBar("Tests", term=term, stream=stream)
        bar.close()
        assert not term.is_closed

    def test_context_manager_closes_owned_resolver(self, make_resolver, stream, monkeypatch):
        term = make_resolver()
        monkeypatch.setattr(terminal_bar, "CapabilityResolver", lambda stream: term)

        with TerminalProgressBar("Tests", stream=stream) as bar:
            bar.update(50, "")

        assert term.is_closed
