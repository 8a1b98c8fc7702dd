"""Domain layer - exceptions, events and the pattern implementations."""
