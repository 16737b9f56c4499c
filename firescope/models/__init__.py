"""Data models for the browsing layer."""
