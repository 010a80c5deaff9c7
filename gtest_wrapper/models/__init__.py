"""Data models for native test runs."""
