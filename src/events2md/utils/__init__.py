"""Utility helpers for events2md."""
