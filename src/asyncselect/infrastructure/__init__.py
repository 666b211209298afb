"""Infrastructure layer: concrete cache stores and option providers."""
