"""HTTP server for the Wise Guy skill."""
