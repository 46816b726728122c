"""Encoders for reported samples."""
