import json
import logging
from datetime import timedelta

from sqlalchemy.exc import SQLAlchemyError

from hausaufgaben import db
from hausaufgaben.models.analytics_event import AnalyticsEvent, utcnow

logger = logging.getLogger(__name__)


def record_event(name, details=None):
    """Append an event. Failures are logged and never reach the caller."""
    try:
        event = AnalyticsEvent(
            event=name,
            details=json.dumps(details, default=str) if details else None,
        )
        db.session.add(event)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.warning("⚠️ Analytics-Ereignis %s nicht gespeichert: %s", name, e)


def summarize(hours):
    since = utcnow() - timedelta(hours=hours)
    rows = (
        db.session.query(AnalyticsEvent.event, db.func.count(AnalyticsEvent.id))
        .filter(AnalyticsEvent.created_at >= since)
        .group_by(AnalyticsEvent.event)
        .all()
    )
    events = {name: count for name, count in rows}
    return events, sum(events.values())
