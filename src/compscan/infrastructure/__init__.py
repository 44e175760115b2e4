"""compscan infrastructure layer: class files, configuration, snapshot storage."""
