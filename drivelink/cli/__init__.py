"""drivelink CLI - Command-line interface for the Drive connector."""
