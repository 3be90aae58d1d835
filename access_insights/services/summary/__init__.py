"""Result summary generation."""
