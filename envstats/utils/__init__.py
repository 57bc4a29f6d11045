"""Utilities for the statistics engine."""
