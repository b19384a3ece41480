"""Infrastructure layer — concrete implementations of domain capabilities."""
