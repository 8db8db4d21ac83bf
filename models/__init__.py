"""Data models for report review requests and results."""
