"""Command-line interface for the cable schedule engine."""
