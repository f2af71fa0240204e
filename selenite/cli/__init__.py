"""CLI module - command-line entry points."""
