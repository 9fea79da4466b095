from flask import Blueprint, jsonify
from ...models import Lenguaje
from ...decorators import handle_db_errors

lenguajes_bp = Blueprint("lenguajes", __name__, url_prefix="/lenguajes")

def serialize_lenguaje(l: Lenguaje) -> dict:
    return {"id": l.id, "nombre": l.nombre}

@lenguajes_bp.get("")
@handle_db_errors
def listar_lenguajes():
    """Obtener todos los lenguajes
    ---
    tags:
      - Lenguajes
    responses:
      200:
        description: Lista de lenguajes
    """
    lenguajes = Lenguaje.query.order_by(Lenguaje.id).all()
    return jsonify([serialize_lenguaje(l) for l in lenguajes])
