"""First-run installation check for hop."""
