"""Per-session productivity scoring."""

from .models import FocusSession, SessionStatus

# Working past this share of the planned duration earns the bonus
OVERTIME_RATIO = 1.2
MIN_SCORE = 0.0
MAX_SCORE = 10.0


def calculate_productivity_score(session: FocusSession) -> float:
    """
    Score a completed session on a 0-10 scale.

    The rating (1-5) is the base. Running over 120% of the planned
    duration adds a point, anything else (finishing exactly at 120%
    included) costs one. Focus adds up to 2 points and distractions
    take away up to 1.

    Sessions that are not completed, or lack a rating or an actual
    duration, score 0.0.
    """
    if (
        session.status != SessionStatus.COMPLETED
        or session.actual_duration is None
        or session.rating is None
    ):
        return 0.0

    score = float(session.rating)

    if session.duration > 0:
        completion_ratio = session.actual_duration / session.duration
        if completion_ratio > OVERTIME_RATIO:
            score += 1.0
        else:
            score -= 1.0

    if session.focus is not None:
        score += session.focus / 10.0 * 2.0

    if session.distractions is not None and session.distractions > 0:
        score -= min(session.distractions / 10.0, 1.0)

    return max(MIN_SCORE, min(MAX_SCORE, score))
