"""Core infrastructure: settings, logging and session access."""
