"""Application layer - catalog use cases exposed to the CLI."""
