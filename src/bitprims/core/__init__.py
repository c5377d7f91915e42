"""Core shared models, widths and validation primitives."""
