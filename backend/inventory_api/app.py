"""WSGI entry point: ``gunicorn inventory_api.app:app``."""

import os

from .main import create_app

# Create Flask app
app = create_app()

if __name__ == "__main__":
    # PORT comes from the container environment; 5000 for local dev
    port = int(os.getenv("PORT", 5000))
    app.run(host="0.0.0.0", port=port, debug=os.getenv("FLASK_ENV", "development") != "production")
