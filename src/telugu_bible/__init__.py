"""Telugu Bible - read-only HTTP API over the Telugu Bible dataset."""

try:
    from telugu_bible._version import __version__
except ImportError:
    # Fallback when _version.py doesn't exist (e.g., not installed or git repo unavailable)
    __version__ = "0.0.0.dev0+unknown"
