from study_sessions.models.session import Session, Subject

__all__ = ["Session", "Subject"]
