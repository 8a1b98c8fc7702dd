"""Infrastructure layer - logging, narration, events, registries."""
