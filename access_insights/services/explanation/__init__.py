"""SQL explanation generation."""
