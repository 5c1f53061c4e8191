"""Command-line interface for Weekendly."""
