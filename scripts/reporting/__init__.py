"""Static HTML report and JSON payload generation."""
