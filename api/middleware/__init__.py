"""Request middleware and auth dependencies."""
