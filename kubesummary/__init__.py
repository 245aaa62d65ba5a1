"""KubeSummary - terminal status dashboard for cluster network components."""

__version__ = "0.1.0"
