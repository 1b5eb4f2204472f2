"""Presentor: local document and image store for the presentation editor."""
