"""Subcommand parsers for the sobel_edges CLI."""
