from dataclasses import dataclass
from typing import Optional

from wildlife_dashboard.config.model import GlobalConfig
from wildlife_dashboard.core.session import DashboardSession
from wildlife_dashboard.core.view_registry import ViewRegistry


@dataclass
class AppConfig:
    """
    Holds shared state for the Dash app: config, the session owning the loaded
    records and the chart view registry. This is passed into layout + callback
    registration functions instead of using module-level globals.
    """
    global_config: GlobalConfig
    session: DashboardSession
    registry: Optional[ViewRegistry] = None

    def validate(self) -> None:
        """Ensure all required services are attached before the app starts."""
        if self.registry is None:
            raise RuntimeError("AppConfig.registry must be initialized.")
