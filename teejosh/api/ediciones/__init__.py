from flask import Blueprint, jsonify
from ...models import Edicion
from ...decorators import handle_db_errors

ediciones_bp = Blueprint("ediciones", __name__, url_prefix="/ediciones")

def serialize_edicion(e: Edicion) -> dict:
    return {"id": e.id, "nombre": e.nombre}

@ediciones_bp.get("")
@handle_db_errors
def listar_ediciones():
    """Obtener todas las ediciones
    ---
    tags:
      - Ediciones
    responses:
      200:
        description: Lista de ediciones
    """
    ediciones = Edicion.query.order_by(Edicion.id).all()
    return jsonify([serialize_edicion(e) for e in ediciones])
