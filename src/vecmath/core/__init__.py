"""Core numeric routines."""
