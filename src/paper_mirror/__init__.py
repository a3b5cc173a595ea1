"""PaperMirror - academic style transfer with stylometric reporting."""

__version__ = "0.1.0"
