# Bind & workers
bind = "0.0.0.0:8000"
wsgi_app = "tokenauth:create_app()"
# Users and refresh tokens live in process memory: a single worker, many threads.
workers = 1
threads = 4
timeout = 60
graceful_timeout = 30
keepalive = 5

# Logs to stdout/stderr
accesslog = "-"
errorlog = "-"
loglevel = "info"  # override with env LOG_LEVEL

# Trust proxy headers
forwarded_allow_ips = "*"
proxy_protocol = False
