from flask import Blueprint, request, jsonify, abort, current_app
from sqlalchemy.orm import joinedload
from ...models import db, Item
from ...decorators import handle_db_errors

items_bp = Blueprint("items", __name__, url_prefix="/items")

def _num(n):
    return float(n) if n is not None else None

def _ref(obj):
    # Relación resumida {id, nombre}; None si no hay
    return {"id": obj.id, "nombre": obj.nombre} if obj is not None else None

def serialize_item(i: Item, con_relaciones: bool = False) -> dict:
    data = {
        "id": i.id,
        "id_producto": i.id_producto,
        "precio": _num(i.precio),
        "cantidad": i.cantidad,
        "id_edicion": i.id_edicion,
        "id_lenguaje": i.id_lenguaje,
    }
    if con_relaciones:
        data["producto"] = _ref(i.producto)
        data["edicion"] = _ref(i.edicion)
        data["lenguaje"] = _ref(i.lenguaje)
    return data

def _asignar_campos(i: Item, data: dict):
    # Reemplazo completo: lo que no venga en el body queda en null
    i.id_producto = data.get("id_producto")
    i.precio = data.get("precio")
    i.cantidad = data.get("cantidad")
    # 0 / "" / False también se guardan como "sin edición"
    i.id_edicion = data.get("id_edicion") or None
    i.id_lenguaje = data.get("id_lenguaje")

def _get_item_or_error(item_id: int) -> Item:
    # scalar_one lanza NoResultFound, que termina en 500 (no en 404)
    return db.session.execute(db.select(Item).filter_by(id=item_id)).scalar_one()

@items_bp.get("")
@handle_db_errors
def listar_items():
    """Obtener todos los items con información relacionada
    ---
    tags:
      - Items
    responses:
      200:
        description: Lista de items
    """
    items = (
        Item.query
        .options(joinedload(Item.producto), joinedload(Item.edicion), joinedload(Item.lenguaje))
        .order_by(Item.id)
        .all()
    )
    return jsonify([serialize_item(i, con_relaciones=True) for i in items])

@items_bp.get("/<int(signed=True):item_id>")
@handle_db_errors
def obtener_item(item_id: int):
    """Obtener un item por su ID
    ---
    tags:
      - Items
    parameters:
      - name: item_id
        in: path
        required: true
        schema:
          type: integer
    responses:
      200:
        description: Item encontrado
      404:
        description: Item no encontrado
    """
    i = db.session.get(Item, item_id)
    if not i:
        abort(404, description="Item not found")
    return jsonify(serialize_item(i))

@items_bp.post("")
@handle_db_errors
def crear_item():
    """Crear un nuevo item
    ---
    tags:
      - Items
    requestBody:
      required: true
      content:
        application/json:
          schema:
            type: object
            properties:
              id_producto:
                type: integer
              precio:
                type: number
              cantidad:
                type: integer
              id_edicion:
                type: integer
                nullable: true
              id_lenguaje:
                type: integer
    responses:
      201:
        description: Item creado exitosamente
    """
    data = request.get_json(silent=True) or {}
    i = Item()
    _asignar_campos(i, data)
    db.session.add(i)
    db.session.commit()
    current_app.logger.info("item %s creado", i.id)
    return jsonify(serialize_item(i)), 201

@items_bp.put("/<int(signed=True):item_id>")
@handle_db_errors
def actualizar_item(item_id: int):
    """Actualizar un item por su ID
    ---
    tags:
      - Items
    parameters:
      - name: item_id
        in: path
        required: true
        schema:
          type: integer
    requestBody:
      required: true
      content:
        application/json:
          schema:
            type: object
    responses:
      200:
        description: Item actualizado
    """
    i = _get_item_or_error(item_id)
    _asignar_campos(i, request.get_json(silent=True) or {})
    db.session.commit()
    return jsonify(serialize_item(i))

@items_bp.delete("/<int(signed=True):item_id>")
@handle_db_errors
def eliminar_item(item_id: int):
    """Eliminar un item por su ID
    ---
    tags:
      - Items
    parameters:
      - name: item_id
        in: path
        required: true
        schema:
          type: integer
    responses:
      200:
        description: Item eliminado correctamente
    """
    i = _get_item_or_error(item_id)
    db.session.delete(i)
    db.session.commit()
    current_app.logger.info("item %s eliminado", item_id)
    return jsonify({"message": "Item deleted successfully"})
