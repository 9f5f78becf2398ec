"""Forge UI presentation layer"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("forge-ui")
except PackageNotFoundError:
    __version__ = "dev"
