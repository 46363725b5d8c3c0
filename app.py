import logging
from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException
from config import Config
from db import StorageError
from init_db import init_db
from routes.auth import auth_bp
from routes.dashboard import dashboard_bp
from routes.entries import entries_bp
from routes.payments import payments_bp
from routes.reports import reports_bp
from routes.settings import settings_bp

def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    if not app.config.get("SECRET_KEY"):
        import secrets
        app.config["SECRET_KEY"] = secrets.token_hex(32)

    logging.basicConfig(level=app.config['LOG_LEVEL'], format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    app.logger.setLevel(app.config['LOG_LEVEL'])

    config_class.init_db(app)

    app.register_blueprint(auth_bp)
    app.register_blueprint(dashboard_bp)
    app.register_blueprint(entries_bp)
    app.register_blueprint(payments_bp)
    app.register_blueprint(settings_bp)
    app.register_blueprint(reports_bp)

    @app.before_request
    def ensure_schema():
        if request.endpoint != 'health' and not app.db.schema_ready:
            init_db(app.db)

    @app.after_request
    def security_headers(response):
        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['X-Frame-Options'] = 'DENY'
        response.headers['Referrer-Policy'] = 'same-origin'
        return response

    @app.errorhandler(StorageError)
    def storage_error(e):
        app.logger.exception("Storage failure on %s %s", request.method, request.path)
        return jsonify({"error": str(e)}), 500

    @app.errorhandler(HTTPException)
    def http_error(e):
        return jsonify({"error": e.description}), e.code

    @app.route('/health')
    def health():
        return jsonify({"status": "ok"})

    return app

app = create_app()
