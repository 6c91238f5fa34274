"""Command-line interface for osfind."""
