"""
Flask route handlers for the REST API.
"""

import sys

from flask import jsonify, request

from rxlog.api.records import cleanup_expired_records, record_required, records, store_record
from rxlog.dates import InputError, parse_examination_date, parse_measurement, parse_record_id
from rxlog.models import Prescription, SubmissionResult

REQUIRED_FIELDS = (
    "id", "first_name", "last_name", "address", "sphere",
    "cylinder", "axis", "examination_date", "optometrist",
)


def _status_for(result: SubmissionResult) -> int:
    if result.success:
        return 201
    if result.violations:
        return 422
    return 500


def _record_from_json(data) -> Prescription:
    """Build a record from a request body. Raises InputError on bad shapes."""
    if not isinstance(data, dict):
        raise InputError("Request body must be a JSON object")
    missing = [f for f in REQUIRED_FIELDS if f not in data]
    if missing:
        raise InputError(f"Missing fields: {', '.join(missing)}")

    record = Prescription()
    record.set_details(
        parse_record_id(data["id"]),
        data["first_name"],
        data["last_name"],
        data["address"],
        parse_measurement(data["sphere"], "sphere"),
        parse_measurement(data["cylinder"], "cylinder"),
        parse_measurement(data["axis"], "axis"),
        parse_examination_date(data["examination_date"]),
        data["optometrist"],
    )
    return record


def register_routes(app, desk):
    """Register all API routes on the Flask *app*, writing through *desk*."""

    # ── Health / info ────────────────────────────────────────────────

    @app.route("/", methods=["GET"])
    def index():
        return jsonify({
            "service": "rxlog Prescription API",
            "version": "1.0.0",
            "status": "running",
            "endpoints": {
                "prescriptions": "/api/prescriptions",
                "record": "/api/prescriptions/<token>",
                "remarks": "/api/prescriptions/<token>/remarks",
                "health": "/health",
            },
        })

    @app.route("/health", methods=["GET"])
    def health():
        checks = {
            "prescription_log": desk.prescription_log.is_writable(),
            "remark_log": desk.remark_log.is_writable(),
        }
        all_healthy = all(checks.values())
        return jsonify({
            "status": "healthy" if all_healthy else "unhealthy",
            "checks": checks,
            "active_records": len(records),
        }), 200 if all_healthy else 503

    # ── Prescriptions ────────────────────────────────────────────────

    @app.route("/api/prescriptions", methods=["POST"])
    def create_prescription():
        if not request.is_json:
            return jsonify({"error": "Content-Type must be application/json"}), 400

        cleanup_expired_records()
        data = request.get_json(silent=True)
        try:
            record = _record_from_json(data)
        except InputError as e:
            return jsonify({"success": False, "error": str(e)}), 400

        result = desk.submit_prescription(record)
        if result.error and not result.violations:
            print(f"[ERROR] {result.error}", file=sys.stderr)

        token = store_record(record)
        body = result.to_dict()
        body["token"] = token
        return jsonify(body), _status_for(result)

    @app.route("/api/prescriptions/<token>", methods=["GET"])
    @record_required
    def get_prescription(token, entry):
        return jsonify({
            "success": True,
            "token": token,
            "record": entry["record"].to_dict(),
            "created_at": entry["created_at"].isoformat(),
            "last_activity": entry["last_activity"].isoformat(),
        }), 200

    @app.route("/api/prescriptions/<token>/remarks", methods=["POST"])
    @record_required
    def add_remark(token, entry):
        if not request.is_json:
            return jsonify({"error": "Content-Type must be application/json"}), 400

        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            data = {}
        remark = data.get("remark")
        category = data.get("category")
        if not isinstance(remark, str) or not isinstance(category, str):
            return jsonify({"success": False, "error": "remark and category are required"}), 400

        record = entry["record"]
        result = desk.submit_remark(record, remark, category)
        if result.error and not result.violations:
            print(f"[ERROR] {result.error}", file=sys.stderr)

        body = result.to_dict()
        body["accepted_remark_categories"] = sorted(record.accepted_remark_categories)
        return jsonify(body), _status_for(result)

    # ── Error handlers ───────────────────────────────────────────────

    @app.errorhandler(404)
    def not_found(e):
        return jsonify({"error": "Endpoint not found", "message": str(e)}), 404

    @app.errorhandler(405)
    def method_not_allowed(e):
        return jsonify({"error": "Method not allowed", "message": str(e)}), 405

    @app.errorhandler(500)
    def internal_error(e):
        return jsonify({"error": "Internal server error", "message": str(e)}), 500
