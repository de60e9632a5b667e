"""Availability app package: derived bed counts, never stored."""
