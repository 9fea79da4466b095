from flask import Blueprint, jsonify
from ...models import Producto
from ...decorators import handle_db_errors

productos_bp = Blueprint("productos", __name__, url_prefix="/productos")

def serialize_producto(p: Producto) -> dict:
    return {
        "id": p.id,
        "nombre": p.nombre,
        "descripcion": p.descripcion,
    }

@productos_bp.get("")
@handle_db_errors
def listar_productos():
    """Obtener todos los productos
    ---
    tags:
      - Productos
    responses:
      200:
        description: Lista de productos
      500:
        description: Error interno
    """
    productos = Producto.query.order_by(Producto.id).all()
    return jsonify([serialize_producto(p) for p in productos])
