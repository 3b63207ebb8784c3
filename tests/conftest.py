"""Shared pytest configuration: enables the stubkit fixtures plugin."""

pytest_plugins = ["stubkit.fixtures"]
