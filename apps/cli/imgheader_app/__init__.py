"""Command line application for generating image array sources."""
