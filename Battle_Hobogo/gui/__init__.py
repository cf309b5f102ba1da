"""Board renderers."""
