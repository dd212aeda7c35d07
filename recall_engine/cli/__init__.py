"""Command-line interface for the recallmate scheduling engine."""
