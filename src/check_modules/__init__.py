"""Configuration loading for the check-modules tool."""
