"""Commit-subject ticket prefix rule for conventional-commit linting."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("ticketlint")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
