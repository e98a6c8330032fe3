"""Technical drawing sheet layouts: frames, title blocks and folding marks."""

__version__ = "0.1.0"