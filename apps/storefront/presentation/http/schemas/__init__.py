"""HTTP schemas."""
