"""An 8-bit virtual machine with a preprocessor and parser for its assembly language."""

__version__ = "0.1.0"