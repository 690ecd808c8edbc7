"""Request and response models, form and request builders, and error types for OpenAI-compatible HTTP APIs."""

__version__ = "0.1.0"