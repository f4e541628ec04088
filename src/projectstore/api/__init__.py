"""HTTP API for ProjectStore."""
