"""Runtime configuration and the shared log file."""
