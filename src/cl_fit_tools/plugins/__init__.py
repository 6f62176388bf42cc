"""Resize plugins."""
