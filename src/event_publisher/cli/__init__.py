"""Command line interface for Event Publisher."""
