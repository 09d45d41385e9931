"""Application layer module."""
