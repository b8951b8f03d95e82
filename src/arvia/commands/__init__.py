"""Arvia CLI Commands - Subcommand implementations."""
