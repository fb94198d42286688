"""Command-line interface for PODARCHIVER."""
