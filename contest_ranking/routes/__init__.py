from .results import results_bp
from .ascents import ascents_bp

def register_blueprints(app):
    app.register_blueprint(results_bp)
    app.register_blueprint(ascents_bp)
