"""Core building blocks: errors, enums, configuration and plain helpers."""
