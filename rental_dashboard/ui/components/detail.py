"""
Detail surface for a selected chart element: a modal dialog on desktop, a
bordered sheet below the chart on mobile. Only one of them is drawn per run,
and since opening a selection closes every other one, at most one dialog
exists app-wide (Streamlit refuses a second one in the same run).
"""

from __future__ import annotations

from typing import Any, Callable, Optional

import streamlit as st

from rental_dashboard.ui.selection import SelectionController


def surface_kind(controller: SelectionController, desktop: bool) -> Optional[str]:
    if not controller.is_open:
        return None
    return "dialog" if desktop else "sheet"


def render_detail_surface(
    controller: SelectionController,
    desktop: bool,
    render_body: Callable[[Any], None],
    title: str,
    key: str,
    on_close: Optional[Callable[[], None]] = None,
) -> Optional[str]:
    """Draw the surface for the open item; returns which one was drawn."""
    kind = surface_kind(controller, desktop)
    item = controller.visible_item
    if kind is None or item is None:
        return None

    def _close() -> None:
        controller.close()
        if on_close is not None:
            on_close()

    if kind == "dialog":

        def _dialog_body() -> None:
            render_body(item)
            if st.button("Close", key=f"{key}_dialog_close", width="stretch"):
                _close()
                st.rerun()

        st.dialog(title, width="small", on_dismiss=_close)(_dialog_body)()
    else:
        with st.container(border=True):
            st.markdown(f"**{title}**")
            render_body(item)
            st.button("Close", key=f"{key}_sheet_close", on_click=_close, width="stretch")
    return kind
