"""Interpret natural-language climate questions into reanalysis data requests."""
