import pytest
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from teejosh.models import db, RegVenta, ProductoVenta


def test_crear_venta_con_fecha_y_hora(client):
    r = client.post("/ventas", json={
        "monto_total": 50.5, "fecha": "2024-05-01", "hora": "14:30:00", "m_pago": "yape"
    })
    assert r.status_code == 201, r.text
    v = r.get_json()
    assert v["monto_total"] == 50.5
    assert v["fecha"] == "2024-05-01"
    assert v["hora"] == "14:30:00"
    assert v["m_pago"] == "yape"


def test_crear_venta_sin_fecha_ni_hora(client):
    r = client.post("/ventas", json={"monto_total": 10, "m_pago": "efectivo"})
    assert r.status_code == 201, r.text
    v = r.get_json()
    assert v["fecha"] is None
    assert v["hora"] is None


def test_hora_invalida_500(client):
    r = client.post("/ventas", json={"monto_total": 10, "hora": "tarde", "m_pago": "efectivo"})
    assert r.status_code == 500
    assert r.get_json() == {"error": "Internal server error"}


def test_listar_ventas_orden_desc(client):
    for monto in (10, 20, 30):
        assert client.post("/ventas", json={"monto_total": monto, "m_pago": "efectivo"}).status_code == 201

    r = client.get("/ventas")
    assert r.status_code == 200
    ids = [v["id_reg_venta"] for v in r.get_json()]
    assert ids == sorted(ids, reverse=True)
    assert len(ids) == 3


def test_obtener_venta_con_lineas(client, seed_venta):
    r = client.get(f"/ventas/{seed_venta['venta_id']}")
    assert r.status_code == 200
    v = r.get_json()
    assert v["monto_total"] == 30.0
    assert [pv["monto"] for pv in v["producto_venta"]] == [10.0, 20.0]
    assert all(pv["id_reg_venta"] == seed_venta["venta_id"] for pv in v["producto_venta"])


def test_venta_inexistente_404(client):
    r = client.get("/ventas/999")
    assert r.status_code == 404
    assert r.get_json() == {"error": "Venta not found"}


def test_venta_id_negativo_404(client):
    r = client.get("/ventas/-5")
    assert r.status_code == 404
    assert r.get_json() == {"error": "Venta not found"}


def test_actualizar_venta(client, seed_venta):
    r = client.put(f"/ventas/{seed_venta['venta_id']}", json={
        "monto_total": 45, "fecha": "2024-06-10", "m_pago": "tarjeta"
    })
    assert r.status_code == 200, r.text
    v = r.get_json()
    assert v["monto_total"] == 45.0
    assert v["fecha"] == "2024-06-10"
    assert v["hora"] is None
    assert v["m_pago"] == "tarjeta"


def test_eliminar_venta_borra_lineas(app, client, seed_venta):
    venta_id = seed_venta["venta_id"]
    r = client.delete(f"/ventas/{venta_id}")
    assert r.status_code == 200
    assert r.get_json() == {"message": "Venta deleted successfully"}

    assert client.get(f"/ventas/{venta_id}").status_code == 404
    with app.app_context():
        assert ProductoVenta.query.filter_by(id_reg_venta=venta_id).count() == 0


def test_eliminar_venta_fallida_no_deja_huerfanos(app, client, seed_venta, monkeypatch):
    def _falla(self, instance):
        raise RuntimeError("db caída")

    monkeypatch.setattr(Session, "delete", _falla)

    venta_id = seed_venta["venta_id"]
    r = client.delete(f"/ventas/{venta_id}")
    assert r.status_code == 500

    # El borrado de las líneas se revirtió junto con el de la venta
    r = client.get(f"/ventas/{venta_id}")
    assert r.status_code == 200
    assert len(r.get_json()["producto_venta"]) == 2
    with app.app_context():
        assert db.session.query(ProductoVenta).filter_by(id_reg_venta=venta_id).count() == 2


def test_fecha_estilo_js_con_z(client):
    r = client.post("/ventas", json={
        "monto_total": 15, "fecha": "2024-05-01T10:00:00.000Z", "hora": "10:00:00.000Z", "m_pago": "plin"
    })
    assert r.status_code == 201, r.text
    v = r.get_json()
    assert v["fecha"] == "2024-05-01"
    assert v["hora"] == "10:00:00"


def test_borrar_solo_la_venta_viola_fk(app, seed_venta):
    # Sin borrar antes las líneas, la FK de producto_venta lo impide
    with app.app_context():
        v = db.session.get(RegVenta, seed_venta["venta_id"])
        db.session.delete(v)
        with pytest.raises(IntegrityError):
            db.session.commit()
        db.session.rollback()


def test_eliminar_venta_con_fk_activas(app, client, seed_venta):
    venta_id = seed_venta["venta_id"]
    assert client.delete(f"/ventas/{venta_id}").status_code == 200
    with app.app_context():
        assert db.session.get(RegVenta, venta_id) is None
        assert ProductoVenta.query.count() == 0
