from functools import wraps
from flask import request, abort, current_app
from werkzeug.exceptions import HTTPException
from .models import db

def handle_db_errors(fn):
    """Convierte cualquier fallo de la vista en un 500 genérico.

    Los 404 lanzados con ``abort`` pasan tal cual. El resto hace rollback
    de la sesión, se registra con traceback y termina en ``abort(500)``.
    """
    @wraps(fn)
    def _w(*args, **kwargs):
        try:
            return fn(*args, **kwargs)
        except HTTPException:
            raise
        except Exception:
            db.session.rollback()
            current_app.logger.exception("error en %s %s", request.method, request.path)
            abort(500)
    return _w
