"""Report payload loading."""
