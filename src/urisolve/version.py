"""Version information for :mod:`urisolve`."""

VERSION = "0.1.0"
