"""Subcommand definitions for the pdfeditx CLI."""
