"""Core infrastructure: logging, errors, diagnostics."""
