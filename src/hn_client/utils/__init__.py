"""Configuration, logging and HTTP helpers."""
