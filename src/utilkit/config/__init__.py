"""Configuration layer — TOML discovery, settings, and logging setup.

Config may import from core for defaults.
It must never import from services, output, or commands.
"""
