"""Command line entry points for the sensor registry."""
