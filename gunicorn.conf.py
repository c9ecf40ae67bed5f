# gunicorn.conf.py
import os

# Gunicorn config variables
# Workers share nothing but the database.
workers = int(os.environ.get('WEB_CONCURRENCY', '2'))
worker_class = 'uvicorn.workers.UvicornWorker'

# Bind to the port specified by the PORT env var.
port = os.environ.get('PORT', '3000')

# Bind to [::] to listen on all available IPv4 and IPv6 interfaces.
bind = f"[::]:{port}"

# Logging
loglevel = os.environ.get('LOG_LEVEL', 'info').lower()
accesslog = '-'  # to stdout
errorlog = '-'   # to stderr

# Make the 'src' package importable when started from the project root.
pythonpath = '.'
