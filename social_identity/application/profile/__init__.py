"""Profile retrieval use cases."""
