"""Progressive overload decision engine.

Reps first, then weight: once the top of the rep range is reached the load
goes up and reps restart at the bottom of the range. Falling below the range
keeps the load; doing so again within the two newest sessions asks for a
recovery check instead.

History contract: entries are ordered newest first. Callers sort before
calling; nothing here re-sorts.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import asdict, dataclass
from typing import Any

from app.core.constants import (
    DEFAULT_WEIGHT_INCREMENT,
    REGRESSION_LOOKBACK,
    REGRESSION_MIN_MATCHES,
    SESSION_HISTORY_WINDOW,
)
from app.core.enums import ProgressionAction, ProgressType
from app.core.errors import InvalidArgument
from app.services.metrics import check_count, check_weight

logger = logging.getLogger(__name__)

MSG_INCREASE_WEIGHT = "Nice! You hit the top of your rep range. Adding weight for next session."
MSG_INCREASE_REPS = "Good work! Try for +1 rep next session."
MSG_CHECK_RECOVERY = "You've struggled for multiple sessions. Let's check your recovery factors."
MSG_MAINTAIN = "You struggled today. Check sleep, nutrition, and recovery before next session."


@dataclass(frozen=True)
class SessionHistoryEntry:
    reps_done: int
    weight: float


@dataclass(frozen=True)
class Recommendation:
    """Next-session prescription. Immutable once returned."""

    action: ProgressionAction
    new_weight: float
    target_reps: int
    message: str
    progress_type: ProgressType
    needs_recovery_check: bool | None = None

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready shape used when the recommendation is stored on a log row."""
        data = asdict(self)
        data["action"] = self.action.value
        data["progress_type"] = self.progress_type.value
        if self.needs_recovery_check is None:
            data.pop("needs_recovery_check")
        return data


@dataclass(frozen=True)
class ExerciseRecommendation:
    exercise_name: str
    recommendation: Recommendation

    def to_dict(self) -> dict[str, Any]:
        return {"exercise_name": self.exercise_name, **self.recommendation.to_dict()}


def _as_history(entries: Iterable[SessionHistoryEntry | Mapping[str, Any]]) -> list[SessionHistoryEntry]:
    out: list[SessionHistoryEntry] = []
    for e in entries:
        if isinstance(e, SessionHistoryEntry):
            out.append(e)
        else:
            out.append(SessionHistoryEntry(reps_done=int(e["reps_done"]), weight=float(e.get("weight") or 0)))
    return out


def is_recurring_regression(history: Sequence[SessionHistoryEntry], reps_min: int) -> bool:
    """True when enough of the newest entries were also below the rep range."""
    recent = history[:REGRESSION_LOOKBACK]
    misses = sum(1 for h in recent if h.reps_done < reps_min)
    return misses >= REGRESSION_MIN_MATCHES


def evaluate_progression(
    reps_done: int,
    weight: float,
    reps_min: int,
    reps_max: int,
    rir: int | None = None,
    history: Iterable[SessionHistoryEntry | Mapping[str, Any]] = (),
    increment: float = DEFAULT_WEIGHT_INCREMENT,
) -> Recommendation:
    """
    Decide the next prescription for one set.

    Priority: reps_done >= reps_max adds weight (even when reps_min == reps_max);
    reps_min <= reps_done < reps_max chases one more rep; anything lower is a
    regression. `increment` defaults to the flat 2.5; callers that know the
    equipment pass weight_increment(kind, unit) instead.
    `rir` is validated and accepted but does not change the decision.
    """
    check_count(reps_done, "reps_done")
    check_weight(weight)
    check_count(reps_min, "reps_min")
    check_count(reps_max, "reps_max")
    if reps_min > reps_max:
        raise InvalidArgument(f"reps_min ({reps_min}) must be <= reps_max ({reps_max})")
    if rir is not None:
        check_count(rir, "rir")
    if isinstance(increment, bool) or not isinstance(increment, (int, float)) or not math.isfinite(increment) or increment < 0:
        raise InvalidArgument(f"increment must be a finite number >= 0, got {increment!r}")

    if reps_done >= reps_max:
        return Recommendation(
            action=ProgressionAction.INCREASE_WEIGHT,
            new_weight=weight + increment,
            target_reps=reps_min,
            message=MSG_INCREASE_WEIGHT,
            progress_type=ProgressType.WEIGHT,
        )
    if reps_done >= reps_min:
        return Recommendation(
            action=ProgressionAction.INCREASE_REPS,
            new_weight=weight,
            target_reps=reps_done + 1,
            message=MSG_INCREASE_REPS,
            progress_type=ProgressType.REPS,
        )

    if is_recurring_regression(_as_history(history), reps_min):
        return Recommendation(
            action=ProgressionAction.CHECK_RECOVERY,
            new_weight=weight,
            target_reps=reps_min,
            message=MSG_CHECK_RECOVERY,
            progress_type=ProgressType.MAINTAIN,
            needs_recovery_check=True,
        )
    return Recommendation(
        action=ProgressionAction.MAINTAIN,
        new_weight=weight,
        target_reps=reps_min,
        message=MSG_MAINTAIN,
        progress_type=ProgressType.MAINTAIN,
    )


def _field(obj: Any, name: str, default: Any = None) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(name, default)
    return getattr(obj, name, default)


def evaluate_session(
    session: Any,
    previous_sessions: Sequence[Any] = (),
) -> list[ExerciseRecommendation]:
    """
    Run evaluate_progression for every exercise in a session.

    `session` has `exercises`, each with name, reps, weight, reps_min, reps_max
    and optional rir (mappings or objects). `previous_sessions` is newest first;
    for each exercise the 3 newest same-name records become its history.
    Output order follows the session's exercise order.
    """
    prior = [ex for s in previous_sessions for ex in (_field(s, "exercises") or [])]
    results: list[ExerciseRecommendation] = []
    for exercise in _field(session, "exercises") or []:
        name = _field(exercise, "name")
        history = [
            SessionHistoryEntry(reps_done=int(_field(e, "reps")), weight=float(_field(e, "weight") or 0))
            for e in prior
            if _field(e, "name") == name
        ][:SESSION_HISTORY_WINDOW]
        rec = evaluate_progression(
            reps_done=_field(exercise, "reps"),
            weight=_field(exercise, "weight"),
            reps_min=_field(exercise, "reps_min"),
            reps_max=_field(exercise, "reps_max"),
            rir=_field(exercise, "rir"),
            history=history,
        )
        if rec.needs_recovery_check:
            logger.info("Recovery check suggested for %s", name)
        results.append(ExerciseRecommendation(exercise_name=name, recommendation=rec))
    return results
