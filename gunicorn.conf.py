import os

wsgi_app = "flowviz.app:create_app()"
bind = "0.0.0.0:5000"
workers = int(os.getenv("GUNICORN_WORKERS", 2))
worker_class = "sync"
timeout = 30
keepalive = 5

# Logging
accesslog = "-"  # stdout
errorlog = "-"  # stderr
loglevel = os.getenv("LOG_LEVEL", "info")

# For development with reload
reload = os.getenv("FLASK_ENV") == "development"
