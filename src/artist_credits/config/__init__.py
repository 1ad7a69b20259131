"""Configuration loading and path discovery."""
