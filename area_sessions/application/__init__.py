"""Application layer: session persistence use cases."""
