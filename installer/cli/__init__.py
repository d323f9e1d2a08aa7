"""Terminal interaction for the first-run check."""
