#!/usr/bin/env python3
"""Standalone Flask application for the urisolve HTTP API.

This script provides an easy way to run the API during development.
Debug mode follows ``FLASK_DEBUG=1`` as read by
:class:`urisolve.backend.config.Config`.

Usage:
    python app.py

The API will be available at http://localhost:5000/api/
"""

import os
import sys
from pathlib import Path

# Add the src directory to the Python path
src_path = Path(__file__).parent / "src"
sys.path.insert(0, str(src_path))

from urisolve.backend.app import create_app  # noqa: E402


def main():
    """Run the Flask development server."""
    app = create_app()

    debug = app.config["DEBUG"]
    host = os.getenv('FLASK_HOST', '0.0.0.0')
    port = int(os.getenv('FLASK_PORT', '5000'))

    print("Starting urisolve API...")
    print(f"Server will be available at: http://localhost:{port}/api/")
    print(f"Debug mode: {debug}")

    app.run(debug=debug, host=host, port=port)


if __name__ == '__main__':
    main()
