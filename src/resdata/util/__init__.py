"""Shared helpers for resdata."""
