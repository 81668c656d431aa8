"""Version information for API Headers SDK"""

__version__ = "1.0.0"
