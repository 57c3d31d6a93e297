"""modoc command line interface."""
