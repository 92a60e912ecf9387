"""HTTP API for ladder and profile generation."""
