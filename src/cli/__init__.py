"""Command line interface for the pattern gallery."""
