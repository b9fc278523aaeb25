"""Pixel surfaces, an OCR pipeline with a small neural network, and raster demos."""

__version__ = "0.1.0"