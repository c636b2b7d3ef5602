"""The single unit of mutable dashboard state."""

from __future__ import annotations

import logging

from mdnsview.constants.enums import InputMode, Pane, SortField
from mdnsview.keyboard.input_machine import InputMachine
from mdnsview.keyboard.keymap import EXTERNAL_ACTIONS, Action
from mdnsview.models.cache.view_cache import ViewCache
from mdnsview.models.core.service_entry import ServiceEntry, current_timestamp_micros
from mdnsview.models.events.discovery_events import (
    CategoryFound,
    CategoryRemoved,
    DiscoveryEvent,
    EntityRemoved,
    EntityResolved,
)
from mdnsview.models.state.app_settings import AppSettings
from mdnsview.models.state.category_index import CategoryIndex
from mdnsview.models.state.dashboard_frame import DashboardFrame, ServiceRow
from mdnsview.models.state.entity_store import EntityStore
from mdnsview.models.state.selection import SelectionController

logger = logging.getLogger(__name__)

_SORT_FIELDS: list[SortField] = list(SortField)


class DashboardState:
    """Entity store, category index, view cache, selection and input mode.

    Not thread-safe: the Coordinator holds its lock around every call.
    Every mutator leaves the selection and category anchor valid for the
    projection it produces.
    """

    def __init__(self, settings: AppSettings | None = None) -> None:
        settings = settings or AppSettings()
        self.store = EntityStore()
        self.categories = CategoryIndex(self.store.references)
        self.view = ViewCache(
            self.store,
            self.categories,
            sort_field=settings.default_sort_field,
            sort_direction=settings.default_sort_direction,
        )
        self.selection = SelectionController(near_end_rows=settings.near_end_rows)
        self.input = InputMachine()
        self.last_error: str | None = None
        self.metrics: dict[str, int] = {}

    @property
    def mode(self) -> InputMode:
        return self.input.mode

    def projection(self) -> tuple[str, ...]:
        return self.view.get_projection()

    def selected_entry(self) -> ServiceEntry | None:
        projection = self.projection()
        if not projection:
            return None
        return self.store.get(projection[self.selection.selected])

    # =========================================================================
    # Discovery mutations
    # =========================================================================

    def apply_event(self, event: DiscoveryEvent) -> bool:
        """Apply one discovery event.

        Returns:
            True if anything visible changed.
        """
        if isinstance(event, CategoryFound):
            return self.add_category(event.name)
        if isinstance(event, CategoryRemoved):
            return self.remove_category(event.name)
        if isinstance(event, EntityResolved):
            return self.upsert_entry(event.entry)
        if isinstance(event, EntityRemoved):
            return self.mark_offline(event.key)
        raise TypeError(f"Unknown discovery event: {event!r}")

    def add_category(self, category: str) -> bool:
        if not self.categories.add(category):
            return False
        self._after_structural_change()
        return True

    def remove_category(self, category: str) -> bool:
        if not self.categories.remove(category):
            return False
        self._after_structural_change()
        return True

    def upsert_entry(self, entry: ServiceEntry) -> bool:
        changed = self.store.upsert(entry)
        # An entry can be resolved before its type shows up in the meta browse.
        changed = self.categories.add(entry.category) or changed
        if changed:
            self._after_structural_change()
        return changed

    def mark_offline(self, key: str, timestamp_micros: int | None = None) -> bool:
        at = timestamp_micros if timestamp_micros is not None else current_timestamp_micros()
        if not self.store.mark_offline(key, at):
            return False
        self._after_structural_change()
        return True

    def prune_offline(self) -> bool:
        """Delete offline entries, drop orphaned categories, keep position."""
        old_length = len(self.projection())
        old_size = len(self.store)
        orphaned = self.store.compact_offline()
        if len(self.store) == old_size:
            return False
        for category in sorted(orphaned):
            self.categories.remove(category)
        self.view.invalidate_filter()
        self.categories.validate()
        self.selection.after_bulk_removal(old_length, len(self.projection()))
        self._reveal_category()
        logger.info("Pruned %d offline services", old_size - len(self.store))
        return True

    def _after_structural_change(self) -> None:
        self.view.invalidate_filter()
        self.categories.validate()
        self.selection.repair(len(self.projection()))
        self._reveal_category()

    # =========================================================================
    # Category anchor
    # =========================================================================

    def select_category(self, index: int | None) -> bool:
        """Change the category filter; always forgets the row position."""
        moved = self.categories.select(index)
        if moved:
            self.view.invalidate_filter()
        self.selection.reset()
        self._reveal_category()
        return moved

    def _reveal_category(self) -> None:
        anchor = self.categories.selected
        self.selection.reveal(Pane.CATEGORIES, 0 if anchor is None else anchor + 1)

    # =========================================================================
    # Layout feedback
    # =========================================================================

    def set_visible_rows(self, pane: Pane, rows: int) -> bool:
        if not self.selection.set_visible_rows(pane, rows):
            return False
        if pane is Pane.SERVICES:
            self.selection.repair(len(self.projection()))
        else:
            self._reveal_category()
        return True

    # =========================================================================
    # Errors and metrics
    # =========================================================================

    def record_error(self, message: str) -> None:
        logger.warning("Operator-visible error: %s", message)
        self.last_error = message

    def set_metrics(self, metrics: dict[str, int]) -> bool:
        if metrics == self.metrics:
            return False
        self.metrics = dict(metrics)
        return True

    # =========================================================================
    # Key routing
    # =========================================================================

    def handle_key(self, key: str, character: str | None = None) -> Action | None:
        """Route a keystroke through the input machine.

        State actions are performed here. Actions in EXTERNAL_ACTIONS are
        returned untouched for the caller to carry out.

        Returns:
            The resolved action, or None if the key is unbound.
        """
        action = self.input.resolve(key, character)
        if action is None or action.name in EXTERNAL_ACTIONS:
            return action
        handler = getattr(self, f"action_{action.name}")
        if action.argument is None:
            handler()
        else:
            handler(action.argument)
        return action

    def action_show_help(self) -> None:
        self.input.open_popup(InputMode.HELP_POPUP)

    def action_show_metrics(self) -> None:
        self.input.open_popup(InputMode.METRICS_POPUP)

    def action_close_popup(self) -> None:
        self.input.close_popup()

    def action_move_up(self) -> None:
        self.selection.move(-1, len(self.projection()))

    def action_move_down(self) -> None:
        self.selection.move(1, len(self.projection()))

    def action_page_up(self) -> None:
        self.selection.page(-1, len(self.projection()))

    def action_page_down(self) -> None:
        self.selection.page(1, len(self.projection()))

    def action_first(self) -> None:
        self.selection.move_to_first()

    def action_last(self) -> None:
        self.selection.move_to_last(len(self.projection()))

    def action_previous_category(self) -> None:
        self.select_category(self.categories.previous_index())

    def action_next_category(self) -> None:
        self.select_category(self.categories.next_index())

    def action_next_sort_field(self) -> None:
        self._cycle_sort_field(1)

    def action_previous_sort_field(self) -> None:
        self._cycle_sort_field(-1)

    def action_toggle_sort_direction(self) -> None:
        self.view.set_sort_direction(self.view.sort_direction.toggled())
        self.selection.reset()

    def action_prune_offline(self) -> None:
        self.prune_offline()

    def action_clear_error(self) -> None:
        self.last_error = None

    def action_begin_filter(self) -> None:
        self.input.begin_filter()

    def action_filter_append(self, character: str) -> None:
        self._apply_live_query(self.input.append(character))

    def action_filter_backspace(self) -> None:
        self._apply_live_query(self.input.backspace())

    def action_commit_filter(self) -> None:
        self.view.set_query(self.input.commit())
        self.selection.reset()

    def action_cancel_filter(self) -> None:
        self.input.cancel()
        self.view.set_query("")
        self.selection.reset()

    def _cycle_sort_field(self, step: int) -> None:
        position = _SORT_FIELDS.index(self.view.sort_field)
        self.view.set_sort_field(_SORT_FIELDS[(position + step) % len(_SORT_FIELDS)])
        self.selection.reset()

    def _apply_live_query(self, query: str) -> None:
        self.view.set_query(query)
        self.selection.repair(len(self.projection()))

    # =========================================================================
    # Snapshot
    # =========================================================================

    def frame(self) -> DashboardFrame:
        """Build the renderer's snapshot, recomputing the projection if stale."""
        projection = self.projection()
        selection = self.selection
        scroll = selection.scroll(Pane.SERVICES)
        visible = selection.visible_rows(Pane.SERVICES)
        window = projection[scroll : scroll + visible] if visible > 0 else projection[scroll:]
        rows = []
        for offset, key in enumerate(window):
            entry = self.store.get(key)
            if entry is None:
                continue
            index = scroll + offset
            rows.append(
                ServiceRow(
                    index=index,
                    entry=entry.model_copy(deep=True),
                    selected=index == selection.selected,
                )
            )
        selected = self.selected_entry()
        return DashboardFrame(
            categories=tuple(self.categories.categories),
            selected_category=self.categories.selected,
            category_scroll=selection.scroll(Pane.CATEGORIES),
            category_rows=selection.visible_rows(Pane.CATEGORIES),
            rows=tuple(rows),
            total_filtered=len(projection),
            total_services=len(self.store),
            selected_index=selection.selected,
            service_scroll=scroll,
            selected_entry=selected.model_copy(deep=True) if selected is not None else None,
            mode=self.input.mode,
            filter_buffer=self.input.buffer,
            query=self.view.query,
            sort_field=self.view.sort_field,
            sort_direction=self.view.sort_direction,
            metrics=tuple(sorted(self.metrics.items())),
            last_error=self.last_error,
        )
