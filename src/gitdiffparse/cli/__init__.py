"""Command line interface for gitdiffparse."""
