"""Key bindings: ``app`` for global keys, ``navigation`` for the summary screen."""

from kubesummary.keyboard.app import APP_BINDINGS
from kubesummary.keyboard.navigation import SUMMARY_SCREEN_BINDINGS

__all__ = ["APP_BINDINGS", "SUMMARY_SCREEN_BINDINGS"]
