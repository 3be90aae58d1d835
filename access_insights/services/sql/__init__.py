"""SQL synthesis, validation and execution."""
