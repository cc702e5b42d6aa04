"""pokefetch command line app."""
