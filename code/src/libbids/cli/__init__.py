"""Command-line interface for libbids."""
