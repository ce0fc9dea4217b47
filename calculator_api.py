"""
Calculator HTTP API
Stateless JSON endpoints over the calculation engine.
Every request carries the full form state; nothing is stored server-side.
"""

import asyncio
from dataclasses import replace

from flask import Response, current_app, jsonify, request

from calculator import PeptideCalculator
from models import CalculatorInputs, DosingSchedule
from presets import all_presets
from reminder import ReminderExporter
from schedule import CustomFrequency


def _payload():
    payload = request.get_json(silent=True)
    return payload if isinstance(payload, dict) else None


def _inputs_from(payload):
    inputs = CalculatorInputs.from_dict(payload)
    if inputs.dosing_schedule is not DosingSchedule.CUSTOM:
        return inputs

    # custom_edit names the field the user just changed
    linked = CustomFrequency.from_edit(
        inputs.custom_doses_per_week,
        inputs.days_between_doses,
        edited=payload.get("custom_edit"),
    )
    return replace(
        inputs,
        custom_doses_per_week=linked.doses_per_week,
        days_between_doses=linked.days_between_doses,
    )


def _inputs_from_request():
    payload = _payload()
    if payload is None:
        return None
    return _inputs_from(payload)


def _bad_request(message):
    return jsonify({"success": False, "error": message}), 400


def register_calculator_routes(app):
    """
    Register calculator API routes with Flask app

    Usage:
        from calculator_api import register_calculator_routes
        register_calculator_routes(app)
    """

    @app.route("/api/calculator/presets", methods=["GET"])
    def api_calculator_presets():
        return jsonify(all_presets())

    @app.route("/api/calculator/calculate", methods=["POST"])
    def api_calculate():
        inputs = _inputs_from_request()
        if inputs is None:
            return _bad_request("JSON body with calculator inputs is required")

        snapshot = PeptideCalculator.full_reconstitution_report(inputs)
        return jsonify({"success": True, **snapshot.to_dict()})

    @app.route("/api/calculator/doses-used", methods=["POST"])
    def api_doses_used():
        payload = _payload()
        if payload is None:
            return _bad_request("JSON body with calculator inputs is required")

        inputs = _inputs_from(payload)
        action = str(payload.get("action") or "").strip().lower()
        if action == "increment":
            inputs = PeptideCalculator.log_dose(inputs)
        elif action == "decrement":
            inputs = PeptideCalculator.undo_dose(inputs)
        else:
            return _bad_request("action must be 'increment' or 'decrement'")

        snapshot = PeptideCalculator.full_reconstitution_report(inputs)
        return jsonify({
            "success": True,
            "doses_used": inputs.doses_used,
            "supply": snapshot.supply.to_dict(),
        })

    @app.route("/api/calculator/reorder-reminder", methods=["POST"])
    def api_reorder_reminder():
        inputs = _inputs_from_request()
        if inputs is None:
            return _bad_request("JSON body with calculator inputs is required")

        snapshot = PeptideCalculator.full_reconstitution_report(inputs)
        if not snapshot.projection.is_exportable:
            return _bad_request(f"No reorder date to export ({snapshot.reorder_display})")

        exporter = ReminderExporter()
        calendar_file = asyncio.run(exporter.export(snapshot))
        current_app.logger.info(
            "Reorder reminder exported for %s", snapshot.projection.reorder_date.isoformat()
        )
        return Response(
            calendar_file.content,
            content_type=calendar_file.mime_type,
            headers={"Content-Disposition": f"attachment; filename={calendar_file.filename}"},
        )
