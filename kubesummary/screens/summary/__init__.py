"""Summary screen module exports."""

from kubesummary.screens.summary.config import PANEL_IDS, PANEL_TITLES
from kubesummary.screens.summary.presenter import (
    SummaryDataLoaded,
    SummaryDataLoadFailed,
    SummaryPresenter,
)
from kubesummary.screens.summary.summary_screen import SummaryScreen

__all__ = [
    "PANEL_IDS",
    "PANEL_TITLES",
    "SummaryDataLoadFailed",
    "SummaryDataLoaded",
    "SummaryPresenter",
    "SummaryScreen",
]
