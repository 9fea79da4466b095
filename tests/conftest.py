import os
import sqlite3
import pytest
from dotenv import load_dotenv
from sqlalchemy import event
from sqlalchemy.engine import Engine
from teejosh import create_app
from teejosh.models import db, Producto, Edicion, Lenguaje, RegVenta, ProductoVenta

load_dotenv()

# SQLite en memoria por defecto; para Postgres exporta DATABASE_URL_TEST
TEST_DB_URL = os.getenv("DATABASE_URL_TEST", "sqlite:///:memory:")


@event.listens_for(Engine, "connect")
def _sqlite_foreign_keys(dbapi_connection, _connection_record):
    # SQLite no valida FKs si no se activa por conexión
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


@pytest.fixture(scope="session")
def app():
    os.environ["APP_ENV"] = "test"
    app = create_app(
        env_name="test",
        config_overrides={
            "TESTING": True,
            "SQLALCHEMY_DATABASE_URI": TEST_DB_URL,
            "SQLALCHEMY_TRACK_MODIFICATIONS": False,
        },
    )
    yield app

    with app.app_context():
        db.drop_all()


@pytest.fixture(autouse=True)
def _reset_db_per_test(app):
    """Esquema limpio alrededor de cada test."""
    with app.app_context():
        db.drop_all()
        db.create_all()
    yield
    with app.app_context():
        db.session.remove()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def seed_catalogos(app):
    # Producto, edición y dos lenguajes base directamente en BD
    with app.app_context():
        p = Producto(nombre="Polera Básica", descripcion="Algodón peinado")
        e = Edicion(nombre="Primera edición")
        l1 = Lenguaje(nombre="Español")
        l2 = Lenguaje(nombre="Inglés")
        db.session.add_all([p, e, l1, l2])
        db.session.commit()
        return {
            "producto_id": p.id,
            "edicion_id": e.id,
            "lenguaje_id": l1.id,
            "lenguaje2_id": l2.id,
        }


@pytest.fixture()
def seed_venta(app, seed_catalogos):
    # Venta con dos líneas
    with app.app_context():
        v = RegVenta(monto_total=30, m_pago="efectivo")
        db.session.add(v)
        db.session.flush()
        db.session.add_all([
            ProductoVenta(id_producto=seed_catalogos["producto_id"], id_reg_venta=v.id_reg_venta, cantidad=1, monto=10),
            ProductoVenta(id_producto=seed_catalogos["producto_id"], id_reg_venta=v.id_reg_venta, cantidad=2, monto=20),
        ])
        db.session.commit()
        return {**seed_catalogos, "venta_id": v.id_reg_venta}
