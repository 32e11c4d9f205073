import logging
import os

from flask import Flask
from tinydb import TinyDB
from tinydb.storages import MemoryStorage

from kzg_routes import kzg_bp, init_kzg_bp

# DB_PATH = ":memory:"  #Memory DB
DB_PATH = os.environ.get("KZG_DB_PATH", "db.json")   #Storage DB
SECRET_KEY = os.environ.get("KZG_SECRET_KEY", "key")


def open_db(path=DB_PATH):
    if path == ":memory:":
        return TinyDB(storage=MemoryStorage)
    return TinyDB(path)


def create_app(db=None):
    app = Flask(__name__)
    app.secret_key = SECRET_KEY

    if db is None:
        db = open_db()
    init_kzg_bp(db.table("kzg"))
    app.register_blueprint(kzg_bp)

    @app.route("/")
    def index():
        return {"endpoints": sorted(
            str(rule) for rule in app.url_map.iter_rules() if str(rule).startswith("/kzg")
        )}

    return app


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    create_app().run(debug=True)
