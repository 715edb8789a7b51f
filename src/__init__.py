"""contractgen — generated contract drafts turned into styled document layouts."""

from contractgen.version import __version__

__all__ = ["__version__"]
