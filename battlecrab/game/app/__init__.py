"""Text-driven setup and battle flows."""
