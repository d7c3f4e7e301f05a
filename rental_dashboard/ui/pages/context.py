from __future__ import annotations

from dataclasses import dataclass
from typing import Any, MutableMapping

from rental_dashboard.config import DashboardSettings
from rental_dashboard.data.client import AnalyticsClient
from rental_dashboard.ui.responsive import is_desktop


@dataclass
class PageContext:
    settings: DashboardSettings
    client: AnalyticsClient
    store: MutableMapping[str, Any]
    viewport_width: int

    @property
    def desktop(self) -> bool:
        return is_desktop(self.viewport_width, self.settings.mobile_breakpoint)
