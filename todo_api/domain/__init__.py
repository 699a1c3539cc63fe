"""Domain: error taxonomy. No infrastructure imports."""
