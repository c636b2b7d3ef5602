"""Unit tests for SelectionController - clamping, paging, scrolling and repair."""

from __future__ import annotations

import random

import pytest

from mdnsview.constants.enums import Pane
from mdnsview.models.core import ServiceEntry
from mdnsview.models.state import AppSettings, DashboardState, SelectionController

X = "_x._tcp.local."


def _controller(visible: int = 5, selected: int = 0, length: int = 20) -> SelectionController:
    controller = SelectionController()
    controller.set_visible_rows(Pane.SERVICES, visible)
    controller.move(selected, length)
    return controller


def _assert_invariants(controller: SelectionController, length: int) -> None:
    selected = controller.selected
    scroll = controller.scroll(Pane.SERVICES)
    visible = controller.visible_rows(Pane.SERVICES)
    if length == 0:
        assert selected == 0
        return
    assert 0 <= selected <= length - 1
    assert scroll <= selected
    if visible > 0:
        assert selected < scroll + visible


# =============================================================================
# Movement
# =============================================================================


class TestSelectionMovement:
    """Tests for move(), page() and jumps."""

    def test_move_clamps_at_both_ends(self) -> None:
        controller = _controller()
        controller.move(-3, 20)
        assert controller.selected == 0
        controller.move(50, 20)
        assert controller.selected == 19

    def test_page_down_three_times_lands_on_last_row(self) -> None:
        """20 rows, 5 visible, row 10: page down x3 ends at 19."""
        controller = _controller(visible=5, selected=10)
        landed = []
        for _ in range(3):
            controller.page(1, 20)
            landed.append(controller.selected)
        assert landed == [14, 18, 19]
        _assert_invariants(controller, 20)

    def test_page_moves_at_least_one_row(self) -> None:
        controller = _controller(visible=1)
        controller.page(1, 20)
        assert controller.selected == 1

    def test_page_up_clamps_to_first_row(self) -> None:
        controller = _controller(visible=5, selected=2)
        controller.page(-1, 20)
        assert controller.selected == 0

    def test_move_to_last_scrolls_window(self) -> None:
        controller = _controller(visible=5)
        controller.move_to_last(20)
        assert controller.selected == 19
        assert controller.scroll(Pane.SERVICES) == 15

    def test_move_to_first_resets_scroll(self) -> None:
        controller = _controller(visible=5, selected=12)
        controller.move_to_first()
        assert controller.selected == 0
        assert controller.scroll(Pane.SERVICES) == 0

    def test_scroll_follows_upward_moves(self) -> None:
        controller = _controller(visible=5, selected=12)
        assert controller.scroll(Pane.SERVICES) == 8
        controller.move(-5, 20)
        assert controller.scroll(Pane.SERVICES) == 7

    def test_empty_projection(self) -> None:
        controller = _controller()
        controller.move(3, 0)
        assert controller.selected == 0
        assert controller.scroll(Pane.SERVICES) == 0


# =============================================================================
# Repair
# =============================================================================


class TestSelectionRepair:
    """Tests for repair() and after_bulk_removal()."""

    def test_repair_clamps_into_shorter_projection(self) -> None:
        controller = _controller(visible=5, selected=15)
        controller.repair(8)
        assert controller.selected == 7
        _assert_invariants(controller, 8)

    def test_repair_pulls_scroll_back_when_list_shrinks(self) -> None:
        controller = _controller(visible=5, selected=19)
        controller.move(-4, 20)
        controller.repair(17)
        assert controller.scroll(Pane.SERVICES) == 12
        _assert_invariants(controller, 17)

    def test_set_visible_rows_reports_change(self) -> None:
        controller = SelectionController()
        assert controller.set_visible_rows(Pane.SERVICES, 4) is True
        assert controller.set_visible_rows(Pane.SERVICES, 4) is False
        assert controller.set_visible_rows(Pane.SERVICES, -1) is True
        assert controller.visible_rows(Pane.SERVICES) == 0

    @pytest.mark.parametrize(("selected", "expected"), [(4, 2), (3, 2), (1, 1), (0, 0)])
    def test_bulk_removal_keeps_position_near_end(self, selected: int, expected: int) -> None:
        controller = _controller(visible=10, selected=selected, length=5)
        controller.after_bulk_removal(5, 3)
        assert controller.selected == expected
        _assert_invariants(controller, 3)

    def test_bulk_removal_to_empty(self) -> None:
        controller = _controller(visible=10, selected=4, length=5)
        controller.after_bulk_removal(5, 0)
        assert controller.selected == 0
        assert controller.scroll(Pane.SERVICES) == 0

    def test_near_end_rows_is_tunable(self) -> None:
        controller = SelectionController(near_end_rows=1)
        controller.set_visible_rows(Pane.SERVICES, 10)
        controller.move(3, 10)
        controller.after_bulk_removal(10, 8)
        assert controller.selected == 3


# =============================================================================
# Dashboard-level scenarios
# =============================================================================


def _entry(name: str, **fields) -> ServiceEntry:
    return ServiceEntry(
        fullname=f"{name}.{X}",
        host=fields.pop("host", f"{name}.local."),
        category=X,
        timestamp_micros=1,
        **fields,
    )


class TestSelectionWithState:
    """Selection behaviour driven through DashboardState mutations."""

    def test_prune_last_two_rows_keeps_selection_at_end(self) -> None:
        state = DashboardState(AppSettings())
        state.set_visible_rows(Pane.SERVICES, 10)
        for name in ("a", "b", "c", "d", "e"):
            state.upsert_entry(_entry(name))
        state.action_last()
        assert state.selection.selected == 4
        state.mark_offline(f"d.{X}", 10)
        state.mark_offline(f"e.{X}", 10)
        assert state.prune_offline() is True
        assert len(state.projection()) == 3
        assert state.selection.selected == 2

    def test_prune_without_offline_entries_is_noop(self) -> None:
        state = DashboardState(AppSettings())
        state.upsert_entry(_entry("a"))
        assert state.prune_offline() is False

    @pytest.mark.parametrize("seed", range(12))
    def test_invariants_hold_for_random_operations(self, seed: int) -> None:
        rng = random.Random(seed)
        state = DashboardState(AppSettings())
        state.set_visible_rows(Pane.SERVICES, rng.randint(0, 6))
        names = [f"svc{i}" for i in range(15)]
        for _ in range(200):
            operation = rng.choice(
                ["upsert", "upsert", "offline", "prune", "move", "page", "last", "rows"]
            )
            if operation == "upsert":
                state.upsert_entry(
                    _entry(rng.choice(names), port=rng.randint(1, 9), host=rng.choice("abc"))
                )
            elif operation == "offline":
                state.mark_offline(f"{rng.choice(names)}.{X}", rng.randint(1, 99))
            elif operation == "prune":
                state.prune_offline()
            elif operation == "move":
                state.selection.move(rng.randint(-3, 3), len(state.projection()))
            elif operation == "page":
                state.selection.page(rng.choice([-1, 1]), len(state.projection()))
            elif operation == "last":
                state.action_last()
            else:
                state.set_visible_rows(Pane.SERVICES, rng.randint(0, 6))
            _assert_invariants(state.selection, len(state.projection()))
