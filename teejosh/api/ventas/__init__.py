from datetime import datetime
from flask import Blueprint, request, jsonify, abort, current_app
from sqlalchemy.orm import selectinload
from ...models import db, RegVenta, ProductoVenta
from ...decorators import handle_db_errors

ventas_bp = Blueprint("ventas", __name__, url_prefix="/ventas")

# La hora se compone sobre esta fecha fija y se guarda solo la parte time
FECHA_EPOCH = "1970-01-01"

def _num(n):
    return float(n) if n is not None else None

def _iso(valor: str) -> datetime:
    # fromisoformat no acepta el sufijo "Z" antes de Python 3.11
    if valor.endswith("Z"):
        valor = valor[:-1] + "+00:00"
    return datetime.fromisoformat(valor)

def _fecha(valor):
    if not valor:
        return None
    return _iso(valor).date()

def _hora(valor):
    if not valor:
        return None
    return _iso(f"{FECHA_EPOCH}T{valor}").time()

def serialize_linea(pv: ProductoVenta) -> dict:
    return {
        "id": pv.id,
        "id_producto": pv.id_producto,
        "id_reg_venta": pv.id_reg_venta,
        "cantidad": pv.cantidad,
        "monto": _num(pv.monto),
    }

def serialize_venta(v: RegVenta, con_lineas: bool = False) -> dict:
    data = {
        "id_reg_venta": v.id_reg_venta,
        "monto_total": _num(v.monto_total),
        "fecha": v.fecha.isoformat() if v.fecha else None,
        "hora": v.hora.isoformat() if v.hora else None,
        "m_pago": v.m_pago,
    }
    if con_lineas:
        data["producto_venta"] = [serialize_linea(pv) for pv in v.producto_venta]
    return data

def _asignar_campos(v: RegVenta, data: dict):
    v.monto_total = data.get("monto_total")
    v.fecha = _fecha(data.get("fecha"))
    v.hora = _hora(data.get("hora"))
    v.m_pago = data.get("m_pago")

def _get_venta_or_error(venta_id: int) -> RegVenta:
    return db.session.execute(db.select(RegVenta).filter_by(id_reg_venta=venta_id)).scalar_one()

@ventas_bp.get("")
@handle_db_errors
def listar_ventas():
    """Obtener todas las ventas
    ---
    tags:
      - Ventas
    description: Incluye las líneas (producto_venta), de la más reciente a la más antigua.
    responses:
      200:
        description: Lista de ventas
    """
    ventas = (
        RegVenta.query
        .options(selectinload(RegVenta.producto_venta))
        .order_by(RegVenta.id_reg_venta.desc())
        .all()
    )
    return jsonify([serialize_venta(v, con_lineas=True) for v in ventas])

@ventas_bp.get("/<int(signed=True):venta_id>")
@handle_db_errors
def obtener_venta(venta_id: int):
    """Obtener una venta por ID
    ---
    tags:
      - Ventas
    parameters:
      - name: venta_id
        in: path
        required: true
        schema:
          type: integer
    responses:
      200:
        description: Venta con sus líneas
      404:
        description: Venta no encontrada
    """
    v = db.session.get(RegVenta, venta_id, options=[selectinload(RegVenta.producto_venta)])
    if not v:
        abort(404, description="Venta not found")
    return jsonify(serialize_venta(v, con_lineas=True))

@ventas_bp.post("")
@handle_db_errors
def crear_venta():
    """Crear una nueva venta
    ---
    tags:
      - Ventas
    requestBody:
      required: true
      content:
        application/json:
          schema:
            type: object
            properties:
              monto_total:
                type: number
              fecha:
                type: string
                format: date
                nullable: true
              hora:
                type: string
                example: "14:30:00"
                nullable: true
              m_pago:
                type: string
    responses:
      201:
        description: Venta creada
    """
    v = RegVenta()
    _asignar_campos(v, request.get_json(silent=True) or {})
    db.session.add(v)
    db.session.commit()
    current_app.logger.info("venta %s creada", v.id_reg_venta)
    return jsonify(serialize_venta(v)), 201

@ventas_bp.put("/<int(signed=True):venta_id>")
@handle_db_errors
def actualizar_venta(venta_id: int):
    """Actualizar una venta
    ---
    tags:
      - Ventas
    parameters:
      - name: venta_id
        in: path
        required: true
        schema:
          type: integer
    responses:
      200:
        description: Venta actualizada
    """
    v = _get_venta_or_error(venta_id)
    _asignar_campos(v, request.get_json(silent=True) or {})
    db.session.commit()
    return jsonify(serialize_venta(v))

@ventas_bp.delete("/<int(signed=True):venta_id>")
@handle_db_errors
def eliminar_venta(venta_id: int):
    """Eliminar una venta y sus líneas
    ---
    tags:
      - Ventas
    parameters:
      - name: venta_id
        in: path
        required: true
        schema:
          type: integer
    responses:
      200:
        description: Venta eliminada
    """
    v = _get_venta_or_error(venta_id)
    # Ambos borrados van en la misma transacción: si falla el segundo,
    # el rollback del decorador restaura las líneas.
    db.session.execute(db.delete(ProductoVenta).where(ProductoVenta.id_reg_venta == venta_id))
    db.session.delete(v)
    db.session.commit()
    current_app.logger.info("venta %s eliminada", venta_id)
    return jsonify({"message": "Venta deleted successfully"})
