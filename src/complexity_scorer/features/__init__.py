"""Feature modules for the complexity scorer."""
