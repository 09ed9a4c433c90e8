# cmdguard/__init__.py
"""
Keep this file minimal so 'cmdguard' is always a proper package.

Do NOT import submodules here (e.g., don't import cli or hooks).
Entry points should import from 'cmdguard.cli' directly:
    from cmdguard.cli import main
"""

__version__ = "0.1.0"
