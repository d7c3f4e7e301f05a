"""
Selected-item / detail-open state for a chart's drill-down.

Two states: Closed (nothing shown) and Open (``selected_item`` shown in the
detail surface). The state lives in a mutable mapping so it survives
Streamlit reruns when that mapping is ``st.session_state``. At most one
controller sharing a mapping is Open at a time: opening one closes the
others.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, MutableMapping, Optional

ACTIVE_DETAIL_KEY = "active_detail"


@dataclass
class SelectionState:
    selected_item: Optional[Any] = None
    detail_open: bool = False


class SelectionController:
    def __init__(self, store: MutableMapping[str, Any], key: str) -> None:
        self._store = store
        self._key = f"selection_{key}"
        if not isinstance(store.get(self._key), SelectionState):
            store[self._key] = SelectionState()

    @property
    def state(self) -> SelectionState:
        return self._store[self._key]

    @property
    def is_open(self) -> bool:
        return self.state.detail_open

    @property
    def visible_item(self) -> Optional[Any]:
        """The item to draw, or None while Closed."""
        state = self.state
        return state.selected_item if state.detail_open else None

    def select(self, item: Any) -> None:
        if item is None:
            return
        active = self._store.get(ACTIVE_DETAIL_KEY)
        if active and active != self._key and isinstance(self._store.get(active), SelectionState):
            self._store[active] = SelectionState()
        self._store[self._key] = SelectionState(selected_item=item, detail_open=True)
        self._store[ACTIVE_DETAIL_KEY] = self._key

    def close(self) -> None:
        # Closing drops the item as well; Closed -> Closed is a no-op.
        if self.state.detail_open or self.state.selected_item is not None:
            self._store[self._key] = SelectionState()
        if self._store.get(ACTIVE_DETAIL_KEY) == self._key:
            del self._store[ACTIVE_DETAIL_KEY]
