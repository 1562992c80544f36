"""
portable_env — generate shell activation scripts for portable tool installs.
"""

__version__ = "0.1.0"
