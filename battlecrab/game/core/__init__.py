"""Core game rules and state."""
