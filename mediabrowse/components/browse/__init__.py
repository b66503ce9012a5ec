"""Browse building blocks."""
