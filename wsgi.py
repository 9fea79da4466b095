# ==============================================================================
# Punto de entrada WSGI
# ==============================================================================
#   gunicorn wsgi:app --bind 0.0.0.0:$PORT
#
# Para desarrollo local:
#   python wsgi.py          (escucha en $PORT, por defecto 3000)
# ==============================================================================
from dotenv import load_dotenv

load_dotenv()

from teejosh import create_app  # noqa: E402  (tras cargar .env)

app = create_app()

if __name__ == '__main__':
    port = app.config["PORT"]
    app.logger.info("Server is running on port %s", port)
    app.run(host='0.0.0.0', port=port)
