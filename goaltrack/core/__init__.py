"""Core domain: models, exceptions and the money primitive."""
