"""Command line tools for BeerStock."""
