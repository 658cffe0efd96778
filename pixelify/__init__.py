"""pixelify — turn any image into an N×N grid of solid colours and a standalone HTML page."""

__version__ = '0.1.0'
