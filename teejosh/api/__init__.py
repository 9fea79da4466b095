from flask import Blueprint

def create_api_bp():
    api_bp = Blueprint("api", __name__)

    from .productos import productos_bp
    from .ediciones import ediciones_bp
    from .lenguajes import lenguajes_bp
    from .items import items_bp
    from .ventas import ventas_bp
    from .producto_venta import producto_venta_bp

    api_bp.register_blueprint(productos_bp)
    api_bp.register_blueprint(ediciones_bp)
    api_bp.register_blueprint(lenguajes_bp)
    api_bp.register_blueprint(items_bp)
    api_bp.register_blueprint(ventas_bp)
    api_bp.register_blueprint(producto_venta_bp)

    @api_bp.get("/")
    def health():
        return "API is running", 200, {"Content-Type": "text/plain; charset=utf-8"}

    return api_bp

def register_blueprints(app):
    api_bp = create_api_bp()
    app.register_blueprint(api_bp)
