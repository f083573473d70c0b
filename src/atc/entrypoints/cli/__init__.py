"""Command-line interface for ATC."""
