# teejosh/extensions.py
from flask_migrate import Migrate
from flask_cors import CORS
from flasgger import Swagger
from .models import db

migrate = Migrate()

def register_extensions(app):
    db.init_app(app)
    migrate.init_app(app, db)
    CORS(
        app,
        resources={r"/*": {"origins": app.config["CORS_ORIGINS"]}},
        supports_credentials=False,
        send_wildcard=True,
        allow_headers=["*"],
        methods=["GET","POST","PUT","DELETE","OPTIONS"]
    )
    # Lee app.config["SWAGGER"]; UI en /docs/
    Swagger(app)
