"""Error translation and HTTP error handling."""
