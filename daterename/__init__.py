"""Rename images with a YYYYMMDD_ prefix taken from their date taken metadata."""

__version__ = "0.1.0"
