"""Command line interface for Wise Guy."""
