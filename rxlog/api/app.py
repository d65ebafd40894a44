"""
Flask application factory and server entry-point.
"""

import logging
import os

from flask import Flask
from flask_cors import CORS

from rxlog.config import API_HOST, API_PORT, LOG_FORMAT, LOG_LEVEL, RECORD_EXPIRY_HOURS
from rxlog.prescription import PrescriptionDesk
from rxlog.api.routes import register_routes


def create_app(prescription_log=None, remark_log=None):
    """Build and return a fully configured Flask application.

    Logs default to the configured file paths; pass ``AppendOnlyLog`` or
    ``MemoryLog`` instances to write elsewhere.
    """
    app = Flask(__name__)
    CORS(app)

    desk = PrescriptionDesk(prescription_log, remark_log)
    app.config["RXLOG_DESK"] = desk
    print(f"[init] Prescription log: {desk.prescription_log.path}")
    print(f"[init] Remark log: {desk.remark_log.path}")

    register_routes(app, desk)
    return app


def main():
    """Run the development server."""
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)

    print("=" * 60)
    print("rxlog – Prescription API Server")
    print("=" * 60)

    app = create_app()
    debug = os.getenv("FLASK_ENV") == "development"

    print(f"\n[server] Starting Flask API on {API_HOST}:{API_PORT}")
    print(f"[server] Debug mode: {debug}")
    print(f"[server] Record expiry: {RECORD_EXPIRY_HOURS} hours")
    print("\nAPI Endpoints:")
    print(f"  - POST http://{API_HOST}:{API_PORT}/api/prescriptions")
    print(f"  - GET  http://{API_HOST}:{API_PORT}/api/prescriptions/<token>")
    print(f"  - POST http://{API_HOST}:{API_PORT}/api/prescriptions/<token>/remarks")
    print(f"  - GET  http://{API_HOST}:{API_PORT}/health")
    print("\n" + "=" * 60)

    # Single writer process: no threads appending to the logs concurrently.
    app.run(host=API_HOST, port=API_PORT, debug=debug, threaded=False)


if __name__ == "__main__":
    main()
