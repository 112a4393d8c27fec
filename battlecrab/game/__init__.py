"""Game domain, application flows and infrastructure."""
