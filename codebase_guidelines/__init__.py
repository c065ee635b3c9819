""" codebase-guidelines package. """
from importlib.metadata import version, PackageNotFoundError


try:
    __version__ = version('codebase-guidelines')
except PackageNotFoundError:
    __version__ = "unknown"
