"""
Loading/error/items state owned by a single chart view.

Each fetch takes a generation token. Only the newest token may write results
or clear the loading flag, so a slow response from an older rerun never
overwrites what a newer one produced.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, List, MutableMapping, Optional, TypeVar

from rental_dashboard.errors import ServiceError, UnknownError, describe_error

logger = logging.getLogger(__name__)

R = TypeVar("R")


@dataclass
class ViewState:
    name: str
    loading: bool = False
    error: Optional[str] = None
    items: List[Any] = field(default_factory=list)
    params: Any = None
    generation: int = 0
    loaded: bool = False

    def begin(self) -> int:
        self.generation += 1
        self.loading = True
        return self.generation

    def is_current(self, token: int) -> bool:
        return token == self.generation

    @contextmanager
    def loading_scope(self, token: int) -> Iterator[None]:
        try:
            yield
        finally:
            if self.is_current(token):
                self.loading = False

    def resolve(self, token: int, items: List[Any], params: Any = None) -> bool:
        if not self.is_current(token):
            logger.debug("Discarding stale %s result (token %s, current %s)", self.name, token, self.generation)
            return False
        self.items = list(items)
        self.params = params
        self.error = None
        self.loaded = True
        return True

    def fail(self, token: int, message: str, params: Any = None) -> bool:
        if not self.is_current(token):
            logger.debug("Discarding stale %s failure (token %s, current %s)", self.name, token, self.generation)
            return False
        self.items = []
        self.params = params
        self.error = message
        self.loaded = True
        return True

    def needs_load(self, params: Any) -> bool:
        return not self.loaded or self.params != params

    def invalidate(self) -> None:
        self.loaded = False


def view_state(store: MutableMapping[str, Any], name: str) -> ViewState:
    key = f"view_{name}"
    state = store.get(key)
    if not isinstance(state, ViewState):
        state = ViewState(name=name)
        store[key] = state
    return state


def invalidate_views(store: MutableMapping[str, Any]) -> None:
    """Mark every view stale so the next render fetches again."""
    for value in list(store.values()):
        if isinstance(value, ViewState):
            value.invalidate()


def load_view(
    state: ViewState,
    fetch: Callable[[], R],
    derive: Callable[[R], List[Any]],
    params: Any = None,
) -> ViewState:
    """Run one fetch -> derive cycle; service failures end up in ``state.error``."""
    token = state.begin()
    with state.loading_scope(token):
        try:
            items = derive(fetch())
        except (ServiceError, UnknownError) as exc:
            logger.warning("Loading %s failed: %s", state.name, exc)
            state.fail(token, describe_error(exc), params)
        else:
            state.resolve(token, items, params)
    return state
