"""WSGI entry point.

Gunicorn:
    gunicorn -c gunicorn.conf.py iam_gateway.wsgi:app

Development server:
    python -m iam_gateway.wsgi
"""
import os

from iam_gateway.flask_app import create_app

app = create_app()


if __name__ == "__main__":
    app.run(host="0.0.0.0", port=int(os.environ.get("PORT", "8080")), debug=False)
