"""Application layer - reconciliation use cases."""
