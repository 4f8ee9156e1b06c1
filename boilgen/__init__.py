"""Schema description, naming, configuration and output planning for model generation."""

__version__ = "4.0.0"