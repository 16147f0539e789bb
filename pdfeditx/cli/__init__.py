"""Command line interface for pdfeditx."""
