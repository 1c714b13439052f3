"""kafkaview - a keyboard-driven terminal browser for Kafka records."""

__version__ = "0.1.0"
