from datetime import datetime, timezone

from hausaufgaben import db


def utcnow():
    return datetime.now(timezone.utc).replace(tzinfo=None)


class AnalyticsEvent(db.Model):
    __tablename__ = "analytics_events"

    id = db.Column(db.Integer, primary_key=True)
    event = db.Column(db.String(100), nullable=False, index=True)
    details = db.Column(db.Text, nullable=True)
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow, index=True)

    def __repr__(self):
        return f"<AnalyticsEvent {self.event}>"
