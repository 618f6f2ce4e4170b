"""
Gunicorn configuration for the Punto Hogar Property API.

    gunicorn -c deploy/gunicorn.conf.py puntohogar.api.wsgi:app
"""

import os

bind = f"{os.getenv('PUNTOHOGAR_HOST', '0.0.0.0')}:{os.getenv('PORT', '3000')}"

# Worker configuration; each worker opens its own database connection
workers = int(os.getenv('GUNICORN_WORKERS', '2'))
worker_class = "sync"
timeout = 30

# Only trust X-Forwarded-* headers from the reverse proxy on localhost
forwarded_allow_ips = "127.0.0.1"

# Logging
accesslog = "-"  # stdout
errorlog = "-"   # stderr
loglevel = "info"
