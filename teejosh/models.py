# models.py
from flask_sqlalchemy import SQLAlchemy
from sqlalchemy.orm import relationship

db = SQLAlchemy()

# Las PK son Integer (no BigInteger) para que SQLite las autoincremente en tests.

# -------------------------
# PRODUCTO (maestro)
# -------------------------
class Producto(db.Model):
    __tablename__ = "producto"
    id = db.Column(db.Integer, primary_key=True)

    nombre      = db.Column(db.Text, nullable=False)
    descripcion = db.Column(db.Text)

    items           = relationship("Item", back_populates="producto")
    productos_venta = relationship("ProductoVenta", back_populates="producto")


# -------------------------
# CLASIFICADORES DE ITEM
# -------------------------
class Edicion(db.Model):
    __tablename__ = "edicion"
    id     = db.Column(db.Integer, primary_key=True)
    nombre = db.Column(db.Text, nullable=False)

    items = relationship("Item", back_populates="edicion")


class Lenguaje(db.Model):
    __tablename__ = "lenguaje"
    id     = db.Column(db.Integer, primary_key=True)
    nombre = db.Column(db.Text, nullable=False)

    items = relationship("Item", back_populates="lenguaje")


# -------------------------
# ITEM (variante vendible de un producto)
# -------------------------
class Item(db.Model):
    __tablename__ = "item"
    id = db.Column(db.Integer, primary_key=True)

    id_producto = db.Column(db.Integer, db.ForeignKey("producto.id"), nullable=False)
    precio      = db.Column(db.Numeric(10, 2), nullable=False)
    cantidad    = db.Column(db.Integer, nullable=False)
    id_edicion  = db.Column(db.Integer, db.ForeignKey("edicion.id"))  # null = sin edición
    id_lenguaje = db.Column(db.Integer, db.ForeignKey("lenguaje.id"), nullable=False)

    __table_args__ = (
        db.Index("idx_item_producto", id_producto),
    )

    producto = relationship("Producto", back_populates="items")
    edicion  = relationship("Edicion",  back_populates="items")
    lenguaje = relationship("Lenguaje", back_populates="items")


# -------------------------
# REG_VENTA (cabecera de la venta)
# -------------------------
class RegVenta(db.Model):
    __tablename__ = "reg_venta"
    id_reg_venta = db.Column(db.Integer, primary_key=True)

    monto_total = db.Column(db.Numeric(10, 2), nullable=False)
    fecha       = db.Column(db.Date)
    hora        = db.Column(db.Time)
    m_pago      = db.Column(db.Text, nullable=False)  # método de pago

    # Sin cascade: el borrado de las líneas lo hace explícitamente DELETE /ventas
    producto_venta = relationship(
        "ProductoVenta",
        back_populates="reg_venta",
        order_by="ProductoVenta.id",
        passive_deletes=True,
    )


# -------------------------
# PRODUCTO_VENTA (línea de una venta)
# -------------------------
class ProductoVenta(db.Model):
    __tablename__ = "producto_venta"
    id = db.Column(db.Integer, primary_key=True)

    id_producto  = db.Column(db.Integer, db.ForeignKey("producto.id"), nullable=False)
    id_reg_venta = db.Column(db.Integer, db.ForeignKey("reg_venta.id_reg_venta"), nullable=False)
    cantidad     = db.Column(db.Integer, nullable=False)
    monto        = db.Column(db.Numeric(10, 2), nullable=False)

    __table_args__ = (
        db.Index("idx_producto_venta_reg_venta", id_reg_venta),
    )

    producto  = relationship("Producto", back_populates="productos_venta")
    reg_venta = relationship("RegVenta", back_populates="producto_venta")
