# showroom/app.py
import logging
import os
import sys

# Ensure project root is on PYTHONPATH when running directly
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

# Show INFO logs even outside the werkzeug access log
logging.basicConfig(level=logging.INFO)

from flask import Flask, render_template, send_from_directory
from showroom.config import Config

# Extensions
from showroom.extensions import cors, init_content_client

# Blueprints
from showroom.api.routes.product_routes import api_products
from showroom.api.routes.category_routes import api_categories
from showroom.client import client_bp
from showroom.models import ContactInfo


def create_app(config_object=Config, content=None) -> Flask:
    """`content` lets callers (tests) hand in their own content client."""
    app = Flask(__name__)
    app.config.from_object(config_object)

    # Init extensions
    init_content_client(app, content)
    cors.init_app(
        app,
        resources={
            r"/api/*": {
                "origins": app.config["CORS_ORIGINS"],
                "methods": ["GET"],
            }
        },
    )

    # Register blueprints
    app.register_blueprint(api_products)
    app.register_blueprint(api_categories)
    app.register_blueprint(client_bp)

    @app.errorhandler(404)
    def not_found(_e):
        return render_template("not_found.html", contact=ContactInfo.empty()), 404

    @app.route("/favicon.ico")
    def favicon():
        fav_dir = os.path.join(app.root_path, "static")
        fav_path = os.path.join(fav_dir, "favicon.ico")
        if os.path.exists(fav_path):
            return send_from_directory(fav_dir, "favicon.ico", mimetype="image/vnd.microsoft.icon")
        return ("", 204)

    if app.config.get("DEBUG_ROUTES"):
        # Diagnostics: list all routes
        @app.get("/__routes")
        def __routes():
            lines = []
            for r in sorted(app.url_map.iter_rules(), key=lambda x: x.rule):
                methods = ",".join(sorted(m for m in r.methods if m in {"GET", "POST"}))
                lines.append(f"{r.rule:35s} -> {r.endpoint} [{methods}]")
            return "<pre>" + "\n".join(lines) + "</pre>"

        # Diagnostics: content service config
        @app.get("/__content_cfg")
        def __content_cfg():
            cfg = app.config
            safe = {
                "CONTENT_API_BASE": cfg.get("CONTENT_API_BASE"),
                "UPLOAD_BASE_URL": cfg.get("UPLOAD_BASE_URL"),
                "CONTENT_API_TIMEOUT": cfg.get("CONTENT_API_TIMEOUT"),
                "CONTENT_API_WORKERS": cfg.get("CONTENT_API_WORKERS"),
            }
            return safe, 200

    return app


# For gunicorn
app = create_app()


if __name__ == "__main__":
    app.run(debug=True)
