"""Command-line frontend for the pre-start checks."""
