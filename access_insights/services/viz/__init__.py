"""Chart configuration generation."""
