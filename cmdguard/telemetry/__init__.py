"""Logging helpers shared by the guard and the CLI."""
