"""codescope: code shape extraction and quality scoring for TypeScript/JavaScript."""

__version__ = "0.1.0"
