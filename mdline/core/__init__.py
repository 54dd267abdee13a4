"""core types and primitives for line conversion."""
