"""Imperative shell: typer commands that drive the picker and print with rich."""
