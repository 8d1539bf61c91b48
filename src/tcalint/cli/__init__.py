"""Command-line interface for tcalint."""
