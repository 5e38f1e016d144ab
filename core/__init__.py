"""Core data model, parsing and provider infrastructure."""
