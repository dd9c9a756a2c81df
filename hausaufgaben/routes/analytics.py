import math

from flask import Blueprint, current_app, jsonify, request

from hausaufgaben import analytics
from hausaufgaben.errors import ValidationError

analytics_bp = Blueprint("analytics", __name__, url_prefix="/api/analytics")

# zehn Jahre
MAX_WINDOW_HOURS = 24 * 365 * 10


@analytics_bp.route("/event", methods=["POST"])
def track_event():
    payload = request.get_json(silent=True) or {}
    name = payload.get("event") if isinstance(payload, dict) else None
    if not isinstance(name, str) or not name.strip():
        raise ValidationError("Ereignisname (event) ist erforderlich")

    data = payload.get("data")
    analytics.record_event(name.strip(), data if isinstance(data, dict) else None)
    return jsonify({"success": True}), 202


@analytics_bp.route("", methods=["GET"])
def summary():
    hours = request.args.get("hours", current_app.config["ANALYTICS_WINDOW_HOURS"])
    try:
        hours = float(hours)
    except (TypeError, ValueError):
        raise ValidationError("hours muss eine Zahl sein")
    if not math.isfinite(hours) or hours <= 0:
        raise ValidationError("hours muss eine positive Zahl sein")
    if hours > MAX_WINDOW_HOURS:
        raise ValidationError(f"hours darf höchstens {MAX_WINDOW_HOURS} sein")

    events, total = analytics.summarize(hours)
    return jsonify({
        "success": True,
        "windowHours": hours,
        "total": total,
        "events": events,
    })
