"""Channel Commander - upgrade discovery and manifest tooling for Maven channels."""

__version__ = "0.1.0"
