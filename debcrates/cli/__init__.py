"""Command line interface for debcrates."""
