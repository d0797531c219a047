"""Core services: codec, settings, logging and exceptions."""
