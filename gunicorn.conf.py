"""Gunicorn configuration file.

Each worker builds its own Flask app (and its own management client) from
the environment, so secrets must be resolvable before workers fork:
1. /run/secrets/descope_project_id, /run/secrets/descope_management_key
2. DESCOPE_PROJECT_ID, DESCOPE_MANAGEMENT_KEY environment variables
"""
import os
from pathlib import Path

bind = os.environ.get("GUNICORN_BIND", f"0.0.0.0:{os.environ.get('PORT', '8080')}")
workers = int(os.environ.get("GUNICORN_WORKERS", "2"))
threads = int(os.environ.get("GUNICORN_THREADS", "4"))
timeout = int(os.environ.get("GUNICORN_TIMEOUT", "30"))
accesslog = "-"
errorlog = "-"
loglevel = os.environ.get("LOG_LEVEL", "info").lower()

wsgi_app = "iam_gateway.wsgi:app"

_REQUIRED_SECRETS = {
    "DESCOPE_PROJECT_ID": "descope_project_id",
    "DESCOPE_MANAGEMENT_KEY": "descope_management_key",
}


def on_starting(server):
    """Fail fast in the master when Descope credentials are missing."""
    secrets_dir = Path("/run/secrets")
    missing = []
    for env_name, secret_name in _REQUIRED_SECRETS.items():
        if (secrets_dir / secret_name).is_file() or os.environ.get(env_name):
            continue
        missing.append(env_name)
    
    if missing:
        server.log.error(f"Missing required configuration: {', '.join(missing)}")
        raise SystemExit(1)
    
    services = os.environ.get("IAM_GATEWAY_SERVICES", "members,tenants,relations")
    server.log.info(f"Starting IAM gateway (services={services})")


def post_fork(server, worker):
    """Called just after a worker has been forked."""
    worker.log.info(f"Worker {worker.pid} ready")
