"""HTTP API for :mod:`urisolve`."""
