"""Unit tests for write options."""

import pytest

from termbutton.button.write_options import (
    WriteCellOpts,
    WriteOptions,
    new_write_options,
)
from termbutton.cell import BgColor, Bold, FgColor, Underline, new_cell_options
from termbutton.utils.colors import COLORS


@pytest.mark.unit
class TestNewWriteOptions:
    """Tests for building write options."""

    def test_empty_without_options(self):
        assert new_write_options().cell_opts == []

    def test_sets_cell_opts(self):
        wo = new_write_options(WriteCellOpts(Bold(), BgColor(COLORS["red"])))
        assert wo.cell_opts == [Bold(), BgColor(COLORS["red"])]

    def test_second_call_replaces_first(self):
        wo = new_write_options(
            WriteCellOpts(Bold(), Underline()),
            WriteCellOpts(BgColor(COLORS["blue"])),
        )
        assert wo.cell_opts == [BgColor(COLORS["blue"])]

    def test_empty_list_replaces_previous(self):
        wo = new_write_options(WriteCellOpts(Bold()), WriteCellOpts())
        assert wo.cell_opts == []

    def test_each_call_gets_its_own_list(self):
        opt = WriteCellOpts(Bold())
        first = new_write_options(opt)
        second = new_write_options(opt)
        first.cell_opts.append(Underline())
        assert second.cell_opts == [Bold()]


@pytest.mark.unit
class TestSetDefaultFgColor:
    """Tests for injecting the default text color."""

    def test_prepends_when_absent(self):
        wo = WriteOptions(cell_opts=[BgColor(COLORS["red"]), Bold()])
        wo.set_default_fg_color(COLORS["black"])
        assert wo.cell_opts == [
            FgColor(COLORS["black"]),
            BgColor(COLORS["red"]),
            Bold(),
        ]

    def test_added_to_empty_list(self):
        wo = WriteOptions()
        wo.set_default_fg_color(COLORS["green"])
        assert wo.cell_opts == [FgColor(COLORS["green"])]

    def test_keeps_explicit_fg_color(self):
        wo = WriteOptions(cell_opts=[Bold(), FgColor(COLORS["yellow"])])
        wo.set_default_fg_color(COLORS["black"])
        assert wo.cell_opts == [Bold(), FgColor(COLORS["yellow"])]

    def test_adds_at_most_one(self):
        wo = WriteOptions(cell_opts=[Bold()])
        wo.set_default_fg_color(COLORS["black"])
        wo.set_default_fg_color(COLORS["white"])
        assert wo.cell_opts == [FgColor(COLORS["black"]), Bold()]

    def test_explicit_color_wins_when_resolved(self):
        wo = new_write_options(WriteCellOpts(FgColor(COLORS["red"])))
        wo.set_default_fg_color(COLORS["black"])
        assert new_cell_options(*wo.cell_opts).fg_color == COLORS["red"]

    def test_default_color_applies_when_resolved(self):
        wo = new_write_options(WriteCellOpts(BgColor(COLORS["blue"])))
        wo.set_default_fg_color(COLORS["black"])
        resolved = new_cell_options(*wo.cell_opts)
        assert resolved.fg_color == COLORS["black"]
        assert resolved.bg_color == COLORS["blue"]
