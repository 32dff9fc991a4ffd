"""Concrete sinks, formatters and diagnostics setup."""
