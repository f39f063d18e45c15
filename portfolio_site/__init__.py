"""Content tables and rendering for the portfolio site."""
