"""Matching, normalization and redaction building blocks for CensorSensor."""
