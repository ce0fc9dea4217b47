"""
Peptide Calculator Web Application

Stateless JSON API for the reconstitution / dosing engine. The form lives in
the client; each request sends the full input state and gets every output
back.
"""

from __future__ import annotations

from flask import Flask, jsonify

from config import Config
from calculator_api import register_calculator_routes


Config.configure_logging()

app = Flask(__name__)
app.config["DEBUG"] = Config.DEBUG

register_calculator_routes(app)


@app.errorhandler(404)
def not_found(_e):
    return jsonify({"success": False, "error": "Not found"}), 404


@app.errorhandler(500)
def server_error(e):
    app.logger.exception("Unhandled error: %s", e)
    return jsonify({"success": False, "error": "Internal server error"}), 500


@app.route("/")
def index():
    return jsonify({
        "service": "peptide-calculator",
        "endpoints": [
            "GET /api/calculator/presets",
            "POST /api/calculator/calculate",
            "POST /api/calculator/doses-used",
            "POST /api/calculator/reorder-reminder",
        ],
    })


# -----------------------------------------------------------------------------
# Run
# -----------------------------------------------------------------------------
if __name__ == "__main__":
    app.run(host="0.0.0.0", port=Config.PORT, debug=Config.DEBUG)
