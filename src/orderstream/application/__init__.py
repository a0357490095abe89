"""Application layer – dispatch engine and transformation pipeline."""
