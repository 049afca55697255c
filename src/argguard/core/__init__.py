"""Core types, kinds and outcome folding."""
