"""Construction of loggers: symbolic factory, builder and settings loading."""
