"""Run two commands joined by a pipe, from an input file to an output file, with small string, buffer and list helpers."""

__version__ = "0.1.0"