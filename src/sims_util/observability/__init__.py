"""Logging setup for applications embedding sims-util."""
