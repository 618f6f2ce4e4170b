"""
WSGI entry point for gunicorn:

    gunicorn -c deploy/gunicorn.conf.py puntohogar.api.wsgi:app
"""

from puntohogar.api.app import create_app

app = create_app()
