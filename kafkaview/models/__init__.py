"""Data models for the kafkaview TUI."""
