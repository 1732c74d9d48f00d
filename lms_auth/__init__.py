from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_cors import CORS
import logging
from dotenv import load_dotenv

load_dotenv()

db = SQLAlchemy()


def create_app(config_name='development'):
    app = Flask(__name__)

    # Config
    from lms_auth.config import get_config
    app.config.from_object(get_config(config_name))

    logging.basicConfig(level=app.config['LOG_LEVEL'])
    app.logger.setLevel(app.config['LOG_LEVEL'])

    if not app.config.get('JWT_SECRET_KEY'):
        if app.config.get('REQUIRE_JWT_SECRET'):
            raise RuntimeError('JWT_SECRET_KEY must be set in production')
        app.logger.warning('JWT_SECRET_KEY not set - using insecure development key')
        app.config['JWT_SECRET_KEY'] = 'dev-secret'

    # Initialize extensions
    db.init_app(app)
    CORS(app, origins=app.config['CORS_ORIGINS'])

    # Create tables with error handling
    with app.app_context():
        from lms_auth import models  # noqa: F401 - registers tables on db.metadata
        try:
            db.create_all()
        except Exception as e:
            app.logger.warning(f"Could not create database tables: {e}")

    from lms_auth.services import build_services
    build_services(app)

    from lms_auth.errors import register_error_handlers
    register_error_handlers(app)

    # Register routes
    from lms_auth.routes import register_routes
    register_routes(app)

    # Health check
    @app.route('/health', methods=['GET'])
    def health():
        return {'status': 'ok'}, 200

    return app
