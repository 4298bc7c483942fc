"""
Container Control Panel

Single-container web panel: start, stop, restart and poll one Docker container.
"""

__version__ = "1.0.0"
__license__ = "MIT"
