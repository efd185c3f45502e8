"""HTTP routes for the interpretation service."""
