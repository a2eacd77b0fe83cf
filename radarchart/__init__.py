"""radarchart - legacy-compatible radar chart image service"""

__version__ = "1.0.0"
