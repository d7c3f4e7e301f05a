"""
Viewport width detection for choosing between desktop and mobile layouts.

Streamlit cannot see the browser width directly, so a zero-size component
writes ``?w=<width>`` into the page URL and keeps it current on resize. The
value is read again on every rerun.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

import streamlit as st
import streamlit.components.v1 as components

from rental_dashboard.config import DEFAULT_MOBILE_BREAKPOINT

logger = logging.getLogger(__name__)

WIDTH_PARAM = "w"
DEFAULT_VIEWPORT_WIDTH = 1200

_WIDTH_SCRIPT = """
<script>
  (function () {
    const host = window.parent || window;
    const param = "%(param)s";
    function sync() {
      const w = host.innerWidth || host.document.documentElement.clientWidth || %(default)d;
      const params = new URLSearchParams(host.location.search);
      if (params.get(param) === String(w)) { return; }
      params.set(param, w);
      host.history.replaceState(null, "", host.location.pathname + "?" + params.toString());
    }
    sync();
    if (!host.__rentalWidthListener) {
      host.__rentalWidthListener = true;
      host.addEventListener("resize", sync);
    }
  })();
</script>
"""


def parse_width(value: Any) -> Optional[int]:
    if isinstance(value, (list, tuple)):
        value = value[-1] if value else None
    if value is None:
        return None
    try:
        width = int(float(str(value).strip()))
    except (TypeError, ValueError):
        return None
    return width if width > 0 else None


def width_from_query(params: Mapping[str, Any]) -> Optional[int]:
    return parse_width(params.get(WIDTH_PARAM))


def is_desktop(width: int, breakpoint: int = DEFAULT_MOBILE_BREAKPOINT) -> bool:
    return width >= breakpoint


def detect_viewport_width(default: int = DEFAULT_VIEWPORT_WIDTH) -> int:
    """Try to read ?w= from the URL; inject the sync script either way."""
    components.html(_WIDTH_SCRIPT % {"param": WIDTH_PARAM, "default": default}, height=0, width=0)
    width = width_from_query(st.query_params)
    if width is None:
        logger.debug("Viewport width unknown yet; assuming %spx", default)
        return default
    return width
