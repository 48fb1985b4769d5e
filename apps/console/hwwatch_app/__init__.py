"""hwwatch console application."""
