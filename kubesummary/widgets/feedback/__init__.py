"""Feedback widgets."""

from kubesummary.widgets.feedback.error_banner import ErrorBanner

__all__ = ["ErrorBanner"]
