# teejosh/__init__.py
from flask import Flask
from werkzeug.exceptions import NotFound
from .config import get_config
from .extensions import register_extensions
from .logging_config import setup_logging
from .api import register_blueprints

def create_app(env_name: str | None = None, config_overrides: dict | None = None) -> Flask:
    app = Flask(__name__)

    # Carga config base (por env_name)
    cfg = get_config(env_name)
    app.config.from_object(cfg)

    # Permite overrides (tests pasan su SQLALCHEMY_DATABASE_URI aquí)
    if config_overrides:
        app.config.update(config_overrides)

    setup_logging(app.config["LOG_LEVEL"], app.config.get("LOG_FILE"))

    # Inicializa extensiones y registra blueprints
    register_extensions(app)
    register_blueprints(app)

    # Errores genéricos
    @app.errorhandler(404)
    def not_found(e):
        # abort(404, description="Item not found") conserva su mensaje
        if e.description == NotFound.description:
            return {"error": "Not found"}, 404
        return {"error": e.description}, 404

    @app.errorhandler(405)
    def method_not_allowed(_e):
        return {"error": "Method not allowed"}, 405

    @app.errorhandler(500)
    def server_error(_e):
        # Nunca se expone el detalle del fallo
        return {"error": "Internal server error"}, 500


    # --- CLI para crear tablas SIN Alembic ---
    @app.cli.command("init-db")
    def init_db_command():
        """Crea todas las tablas definidas en los modelos."""
        from .models import db  # import local para evitar ciclos
        with app.app_context():
            db.create_all()
        app.logger.info("Tablas creadas")

    return app
