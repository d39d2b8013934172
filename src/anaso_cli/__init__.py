"""Command-line interface for the Anaso post ranking score."""
