"""Computer opponents for Indigo."""
