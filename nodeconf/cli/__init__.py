"""Command line entry point for nodeconf."""
