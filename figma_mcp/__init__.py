"""
figma-mcp: Figma REST API operations exposed as callable tools.
"""

__version__ = "0.6.2"
