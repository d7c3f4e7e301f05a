from __future__ import annotations

from rental_dashboard.data.transform import DisplayFeature
from rental_dashboard.ui.components.detail import surface_kind
from rental_dashboard.ui.selection import ACTIVE_DETAIL_KEY, SelectionController, SelectionState

AREA = DisplayFeature("Area", 0.31, "Usable floor area.", "#1f77b4")
ROOMS = DisplayFeature("Rooms", 0.08, "Number of rooms.", "#ff7f0e")


def test_starts_closed() -> None:
    controller = SelectionController({}, "features")

    assert controller.state == SelectionState()
    assert controller.visible_item is None
    assert not controller.is_open


def test_select_opens_with_exact_record() -> None:
    controller = SelectionController({}, "features")

    controller.select(AREA)

    assert controller.is_open
    assert controller.state.selected_item is AREA
    assert controller.visible_item is AREA


def test_select_from_open_replaces_item() -> None:
    controller = SelectionController({}, "features")
    controller.select(AREA)
    controller.select(ROOMS)

    assert controller.visible_item is ROOMS


def test_close_clears_and_is_idempotent() -> None:
    controller = SelectionController({}, "features")
    controller.close()
    assert not controller.is_open

    controller.select(AREA)
    controller.close()
    controller.close()

    assert not controller.is_open
    assert controller.state.selected_item is None
    assert controller.visible_item is None


def test_state_survives_new_controller_over_same_store() -> None:
    store: dict = {}
    SelectionController(store, "features").select(AREA)

    assert SelectionController(store, "features").visible_item is AREA
    assert SelectionController(store, "trends").visible_item is None


def test_surface_choice_follows_current_width() -> None:
    controller = SelectionController({}, "features")
    assert surface_kind(controller, desktop=True) is None

    controller.select(AREA)
    assert surface_kind(controller, desktop=True) == "dialog"
    # Re-evaluated per render: the same open selection moves to the sheet
    assert surface_kind(controller, desktop=False) == "sheet"

    controller.close()
    assert surface_kind(controller, desktop=False) is None


def test_opening_one_view_closes_the_other() -> None:
    store: dict = {}
    features = SelectionController(store, "features")
    trends = SelectionController(store, "trends")

    features.select(AREA)
    trends.select(ROOMS)

    assert trends.visible_item is ROOMS
    assert not features.is_open
    assert features.state == SelectionState()

    features.select(AREA)
    assert not trends.is_open


def test_closing_a_background_view_keeps_the_active_one() -> None:
    store: dict = {}
    features = SelectionController(store, "features")
    trends = SelectionController(store, "trends")
    trends.select(ROOMS)

    features.close()

    assert trends.visible_item is ROOMS
    trends.close()
    assert ACTIVE_DETAIL_KEY not in store
