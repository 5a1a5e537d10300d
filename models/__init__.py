"""Data models for upload classification."""
