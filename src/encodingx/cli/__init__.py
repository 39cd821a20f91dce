"""Command line interface for encodingx."""
