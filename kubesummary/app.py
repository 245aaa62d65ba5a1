"""Main application class for KubeSummary."""

from __future__ import annotations

import logging
from pathlib import Path

from textual.app import App
from textual.binding import Binding

from kubesummary.constants import APP_TITLE
from kubesummary.keyboard.app import APP_BINDINGS
from kubesummary.models.state.app_settings import AppSettings, ConfigLoadError
from kubesummary.models.state.config_manager import ConfigManager
from kubesummary.screens.summary import SummaryScreen

logger = logging.getLogger(__name__)


class KubeSummaryApp(App[None]):
    """Main TUI application for KubeSummary."""

    TITLE = APP_TITLE
    BINDINGS: list[Binding] = APP_BINDINGS

    settings: AppSettings

    def __init__(
        self,
        context: str | None = None,
        settings_path: Path | None = None,
        settings: AppSettings | None = None,
    ) -> None:
        super().__init__()
        self.settings_path = settings_path
        if settings is not None:
            self.settings = settings
        else:
            self._load_settings()

        # Apply CLI overrides if provided
        if context is not None:
            self.settings.context = context
        self.context = self.settings.context

    def _load_settings(self) -> None:
        """Load application settings from persistent storage."""
        try:
            self.settings = ConfigManager.load(self.settings_path)
        except ConfigLoadError as exc:
            # Use defaults if loading fails
            logger.warning("Falling back to default settings: %s", exc)
            self.settings = AppSettings()

    def on_mount(self) -> None:
        if self.settings.theme in self.available_themes:
            self.theme = self.settings.theme
        self.push_screen(SummaryScreen(context=self.context))
