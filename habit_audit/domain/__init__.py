"""Domain models shared by the scoring services."""
