from flask import Blueprint, request, jsonify, abort
from sqlalchemy.orm import joinedload
from ...models import db, ProductoVenta
from ...decorators import handle_db_errors
from ..productos import serialize_producto
from ..ventas import serialize_linea, serialize_venta

producto_venta_bp = Blueprint("producto_venta", __name__, url_prefix="/producto_venta")

def _asignar_campos(pv: ProductoVenta, data: dict):
    pv.id_producto = data.get("id_producto")
    pv.id_reg_venta = data.get("id_reg_venta")
    pv.cantidad = data.get("cantidad")
    pv.monto = data.get("monto")

def _get_linea_or_error(pv_id: int) -> ProductoVenta:
    return db.session.execute(db.select(ProductoVenta).filter_by(id=pv_id)).scalar_one()

@producto_venta_bp.get("")
@handle_db_errors
def listar_producto_venta():
    """Obtener todos los productos vendidos
    ---
    tags:
      - ProductoVenta
    responses:
      200:
        description: Líneas de venta con su producto y su venta
    """
    lineas = (
        ProductoVenta.query
        .options(joinedload(ProductoVenta.producto), joinedload(ProductoVenta.reg_venta))
        .order_by(ProductoVenta.id)
        .all()
    )
    return jsonify([
        {
            **serialize_linea(pv),
            "producto": serialize_producto(pv.producto) if pv.producto else None,
            "reg_venta": serialize_venta(pv.reg_venta) if pv.reg_venta else None,
        }
        for pv in lineas
    ])

@producto_venta_bp.get("/<int(signed=True):pv_id>")
@handle_db_errors
def obtener_producto_venta(pv_id: int):
    """Obtener un producto_venta por ID
    ---
    tags:
      - ProductoVenta
    parameters:
      - name: pv_id
        in: path
        required: true
        schema:
          type: integer
    responses:
      200:
        description: Línea encontrada
      404:
        description: Línea no encontrada
    """
    pv = db.session.get(ProductoVenta, pv_id)
    if not pv:
        abort(404, description="ProductoVenta not found")
    return jsonify(serialize_linea(pv))

@producto_venta_bp.post("")
@handle_db_errors
def crear_producto_venta():
    """Crear un registro de producto_venta
    ---
    tags:
      - ProductoVenta
    requestBody:
      required: true
      content:
        application/json:
          schema:
            type: object
            properties:
              id_producto:
                type: integer
              id_reg_venta:
                type: integer
              cantidad:
                type: integer
              monto:
                type: number
    responses:
      201:
        description: Línea creada
    """
    pv = ProductoVenta()
    _asignar_campos(pv, request.get_json(silent=True) or {})
    db.session.add(pv)
    db.session.commit()
    return jsonify(serialize_linea(pv)), 201

@producto_venta_bp.put("/<int(signed=True):pv_id>")
@handle_db_errors
def actualizar_producto_venta(pv_id: int):
    """Actualizar un producto_venta
    ---
    tags:
      - ProductoVenta
    parameters:
      - name: pv_id
        in: path
        required: true
        schema:
          type: integer
    responses:
      200:
        description: Línea actualizada
    """
    pv = _get_linea_or_error(pv_id)
    _asignar_campos(pv, request.get_json(silent=True) or {})
    db.session.commit()
    return jsonify(serialize_linea(pv))

@producto_venta_bp.delete("/<int(signed=True):pv_id>")
@handle_db_errors
def eliminar_producto_venta(pv_id: int):
    """Eliminar un producto_venta
    ---
    tags:
      - ProductoVenta
    parameters:
      - name: pv_id
        in: path
        required: true
        schema:
          type: integer
    responses:
      200:
        description: Línea eliminada
    """
    pv = _get_linea_or_error(pv_id)
    db.session.delete(pv)
    db.session.commit()
    return jsonify({"message": "ProductoVenta deleted successfully"})
