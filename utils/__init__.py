"""Logging and command line helpers."""
