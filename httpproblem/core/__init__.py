"""Core configuration, constants and composition root."""
