# app.py
from __future__ import annotations
import logging
from flask import Flask, render_template

from blueprints import api_bp
from config import FLASK_PORT, LOG_LEVEL

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

app = Flask(__name__)
app.json.sort_keys = False
app.register_blueprint(api_bp)


@app.get("/")
def index():
    return render_template("index.html")


if __name__ == "__main__":
    app.run(
        debug=True,
        host="0.0.0.0",
        port=FLASK_PORT
    )
