"""Service layer: compiler, renderer, store and lifecycle."""
