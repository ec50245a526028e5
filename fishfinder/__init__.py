"""
FishFinder - Hay Day fishing reference

A small command-line reference for the Hay Day fish catalog: search fish by
name, spot or lure colour, and view the full catalog as a table.
"""

from . import cli, clients, config, core, utils

__version__ = "0.1.0"
__all__ = ["cli", "clients", "config", "core", "utils"]
