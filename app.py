# app.py
# Flask application built with the Application Factory pattern

import logging

from flask import Flask, jsonify
from config import Config
from extensions import db, migrate
from errors import JudgingError

# Models must be imported here so that Alembic (Migrate) can see them
from models import User, Hackathon, HackathonUser, RoleChange, Team, Project, Criterion, JudgeAssignment, Score


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.logger.setLevel(getattr(logging, str(app.config.get('LOG_LEVEL', 'INFO')).upper(), logging.INFO))

    # --- Bind the extensions to this app instance ---
    db.init_app(app)
    migrate.init_app(app, db)

    # --- Blueprints ---
    from routes.judging import judging_bp

    app.register_blueprint(judging_bp)

    @app.errorhandler(JudgingError)
    def handle_judging_error(error):
        app.logger.warning("%s: %s", type(error).__name__, error.message)
        return jsonify(error.to_dict()), error.status_code

    # --- CLI ---
    from seed_data import seed_demo_command

    app.cli.add_command(seed_demo_command)

    return app
