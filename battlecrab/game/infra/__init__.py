"""Configuration, paths and logging policy."""
