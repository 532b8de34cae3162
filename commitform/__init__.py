"""Conventional Commits message composer."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("commitform")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
