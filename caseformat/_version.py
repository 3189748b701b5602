import importlib.metadata

try:
    __version__ = importlib.metadata.version("caseformat")
except importlib.metadata.PackageNotFoundError:
    # not installed, e.g. running from a source checkout
    __version__ = "1.0.0"

__format_version__ = "2"
