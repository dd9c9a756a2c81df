import time
from datetime import datetime

from flask import Blueprint, current_app, jsonify, request

from hausaufgaben import get_homework
from hausaufgaben.errors import ValidationError

homework_bp = Blueprint("homework", __name__)


def last_updated():
    # wie toLocaleString('de-DE')
    return datetime.now().strftime("%d.%m.%Y, %H:%M:%S")


@homework_bp.route("/")
def home():
    homework = get_homework()
    return jsonify({
        "message": "Hausaufgaben API läuft!",
        "version": homework.get("Version"),
        "wartungsarbeiten": homework.get("Wartungsarbeiten"),
    })


@homework_bp.route("/api/hausaufgaben", methods=["GET"])
def list_homework():
    return jsonify({
        "success": True,
        "data": get_homework().all(),
        "lastUpdated": last_updated(),
    })


@homework_bp.route("/api/hausaufgaben/<field>", methods=["GET"])
def get_field(field):
    value = get_homework().get(field)
    return jsonify({
        "success": True,
        "field": field,
        "value": value,
        "lastUpdated": last_updated(),
    })


@homework_bp.route("/api/hausaufgaben/<field>", methods=["PUT"])
def update_field(field):
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict) or "value" not in payload:
        raise ValidationError("Wert (value) ist erforderlich")

    value = get_homework().set(field, payload["value"])
    current_app.logger.info('📝 %s aktualisiert: "%s"', field, value)

    return jsonify({
        "success": True,
        "message": f"{field} erfolgreich aktualisiert!",
        "field": field,
        "value": value,
        "lastUpdated": last_updated(),
    })


@homework_bp.route("/api/hausaufgaben", methods=["POST"])
def update_many():
    updates = request.get_json(silent=True)
    if not isinstance(updates, dict):
        raise ValidationError("Ungültiges Update-Format")

    updated, errors = get_homework().update(updates)
    for field in updated:
        current_app.logger.info('📝 %s aktualisiert: "%s"', field, updates[field])

    if errors and not updated:
        return jsonify({"success": False, "error": "Keine Felder aktualisiert", "errors": errors}), 400

    payload = {
        "success": True,
        "message": f"{len(updated)} Felder erfolgreich aktualisiert!",
        "updatedFields": updated,
        "lastUpdated": last_updated(),
    }
    if errors:
        payload["errors"] = errors
    return jsonify(payload)


@homework_bp.route("/api/hausaufgaben", methods=["DELETE"])
def reset_homework():
    data = get_homework().reset()
    current_app.logger.info("🗑️ Alle Hausaufgaben zurückgesetzt")
    return jsonify({
        "success": True,
        "message": "Alle Hausaufgaben zurückgesetzt!",
        "data": data,
        "lastUpdated": last_updated(),
    })


@homework_bp.route("/api/wartung", methods=["POST"])
def toggle_maintenance():
    homework = get_homework()
    active = homework.toggle_maintenance()
    return jsonify({
        "success": True,
        "message": "Wartungsmodus aktiviert" if active else "Wartungsmodus deaktiviert",
        "wartungsarbeiten": active,
        "zeit": homework.get("WartungsarbeitenZeit"),
    })


@homework_bp.route("/api/status", methods=["GET"])
def status():
    homework = get_homework()
    return jsonify({
        "success": True,
        "status": {
            "version": homework.get("Version"),
            "wartungsarbeiten": homework.get("Wartungsarbeiten"),
            "wartungszeit": homework.get("WartungsarbeitenZeit"),
            "lateinStunden": homework.get("latein"),
            "totalFields": len(homework),
            "uptime": time.monotonic() - current_app.extensions["started_at"],
            "lastUpdated": last_updated(),
        },
    })
