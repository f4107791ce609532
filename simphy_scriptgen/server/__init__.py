"""HTTP server and command line entry points."""
