"""Worked exercise solutions, terminal status lines and rust-project.json generation."""

__version__ = "5.5.1"