"""Domain models and protocol interfaces."""
