"""Command-line interface for Ledgit."""
