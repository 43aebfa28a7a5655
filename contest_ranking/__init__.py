from flask import Flask
from .config import Config
from .extensions import db


def create_app(config_object=Config):
    app = Flask(__name__)
    app.config.from_object(config_object)

    db.init_app(app)

    # Import so every model is registered on db.metadata before create_all()
    from contest_ranking import models

    from contest_ranking.routes import register_blueprints
    register_blueprints(app)

    return app
