"""Data models for KubeSummary."""
