from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Iterable, List, Optional, Sequence, Tuple

from PySide6.QtCore import QObject, Signal

logger = logging.getLogger(__name__)


DEACTIVATE = "deactivate"
ACTIVATE = "activate"
RENDER = "render"
SELECTED = "selected"


@dataclass(frozen=True)
class NavigationEvent:
    kind: str
    index: int
    page: Any = None


@dataclass(frozen=True)
class NavigationState:
    """Ordered pages plus the active index (None only when there are no pages)."""

    pages: Tuple[Any, ...] = ()
    active_index: Optional[int] = None

    @property
    def count(self) -> int:
        return len(self.pages)

    @property
    def active_page(self) -> Any:
        if self.active_index is None:
            return None
        return self.pages[self.active_index]


def sort_pages(pages: Iterable[Any]) -> Tuple[Any, ...]:
    # sorted() is stable: equal orders keep registration order.
    return tuple(sorted((p for p in (pages or []) if p is not None), key=lambda p: int(p.order)))


def transition(state: NavigationState, index: Any) -> Tuple[NavigationState, List[NavigationEvent]]:
    """
    Pure selection step.

    Returns the next state and the events to run, in order:
    deactivate(old) -> activate(new) -> render(new) -> selected(new).
    An invalid index yields the same state and no events; re-selecting the
    active index only re-renders.
    """
    if isinstance(index, bool) or not isinstance(index, int):
        return state, []
    if not 0 <= index < state.count:
        return state, []

    page = state.pages[index]
    if index == state.active_index:
        return state, [NavigationEvent(RENDER, index, page)]

    events: List[NavigationEvent] = []
    if state.active_index is not None:
        events.append(NavigationEvent(DEACTIVATE, state.active_index, state.active_page))
    events.append(NavigationEvent(ACTIVATE, index, page))
    events.append(NavigationEvent(RENDER, index, page))
    events.append(NavigationEvent(SELECTED, index, page))
    return replace(state, active_index=index), events


class NavigationController(QObject):
    """Owns the page sequence and the single active page."""

    page_selected = Signal(int)

    def __init__(self, container: Any = None, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._state = NavigationState()
        self._container = container

    # ---- read-only state ----

    @property
    def state(self) -> NavigationState:
        return self._state

    @property
    def pages(self) -> Tuple[Any, ...]:
        return self._state.pages

    @property
    def count(self) -> int:
        return self._state.count

    @property
    def active_index(self) -> Optional[int]:
        return self._state.active_index

    @property
    def active_page(self) -> Any:
        return self._state.active_page

    def set_container(self, container: Any) -> None:
        self._container = container

    # ---- operations ----

    def register(self, pages: Sequence[Any]) -> None:
        """Replace the page set (sorted by order) and activate the first page."""
        new_pages = sort_pages(pages)
        # A retained active page is deactivated first; dropped modules get no further hooks.
        old_page = self._state.active_page
        if old_page is not None and any(p is old_page for p in new_pages):
            self._dispatch([NavigationEvent(DEACTIVATE, self._state.active_index, old_page)])
        self._state = NavigationState(pages=new_pages)
        logger.debug("Registered %d page(s)", self._state.count)
        if self._state.count == 0:
            self._render(None)
            return
        self.select_by_index(0)

    def select_by_index(self, index: Any) -> bool:
        new_state, events = transition(self._state, index)
        if not events:
            logger.debug("Ignoring page selection %r (count=%d)", index, self._state.count)
            return False
        self._state = new_state
        self._dispatch(events)
        return True

    def navigate_to(self, navigation_name: str) -> bool:
        for i, page in enumerate(self._state.pages):
            if page.navigation_name == navigation_name:
                return self.select_by_index(i)
        logger.debug("No page named %r", navigation_name)
        return False

    # ---- event execution ----

    def _dispatch(self, events: Iterable[NavigationEvent]) -> None:
        for event in events:
            try:
                if event.kind == DEACTIVATE:
                    event.page.on_deactivated()
                elif event.kind == ACTIVATE:
                    event.page.on_activated()
                elif event.kind == RENDER:
                    self._render(event.page)
                elif event.kind == SELECTED:
                    self.page_selected.emit(event.index)
            except Exception:
                logger.exception("Navigation error: %s page %d", event.kind, event.index)

    def _render(self, page: Any) -> None:
        if self._container is not None:
            self._container.set_page(page)
