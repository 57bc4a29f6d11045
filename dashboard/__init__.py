"""Headless dashboard runners."""
