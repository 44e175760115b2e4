"""compscan presentation layer: command line interface."""
