"""WSGI entrypoint for Gunicorn.

Usage:
  gunicorn -w 2 -b 0.0.0.0:8000 wsgi:app
"""

from inventory_app import create_app

app = create_app()
