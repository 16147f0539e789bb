"""Annotation baking tool plugin."""
