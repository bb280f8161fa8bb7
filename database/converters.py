"""Conversion between asyncpg database rows and Pydantic domain models."""

import json
from typing import Optional
from uuid import UUID

from models import PersistedInsightRecord, Round, StrokesGained, User

_SG_COLUMNS = {
    "total": "sg_total",
    "off_tee": "sg_off_tee",
    "approach": "sg_approach",
    "putting": "sg_putting",
    "penalties": "sg_penalties",
    "residual": "sg_residual",
}


def _float_or_none(value) -> Optional[float]:
    return float(value) if value is not None else None


def _json_value(value, default):
    """JSONB columns come back as text unless a codec is registered."""
    if value is None:
        return default
    if isinstance(value, str):
        return json.loads(value)
    return value


# ================================================================
# Row -> Model (reads)
# ================================================================

def strokes_gained_from_row(row) -> Optional[StrokesGained]:
    """sg_* columns of a users.rounds row -> StrokesGained, None if none are set."""
    values = {field: _float_or_none(row[column]) for field, column in _SG_COLUMNS.items()}
    if all(v is None for v in values.values()):
        return None
    return StrokesGained(**values)


def round_from_row(row) -> Round:
    """users.rounds row -> Round model."""
    return Round(
        id=str(row["id"]),
        user_id=str(row["user_id"]) if row["user_id"] else None,
        date=row["round_date"],
        created_at=row["created_at"],
        score=row["total_score"],
        par=row["par"],
        holes_played=row["holes_played"],
        course_name=row["course_name_played"],
        fir_hit=row["fir_hit"],
        fir_possible=row["fir_possible"],
        gir_hit=row["gir_hit"],
        putts=row["putts"],
        penalties=row["penalties"],
        strokes_gained=strokes_gained_from_row(row),
    )


def user_from_row(user_row) -> User:
    """users.users row -> User model."""
    return User(
        id=str(user_row["id"]),
        name=user_row["name"],
        email=user_row["email"],
        subscription_tier=user_row["subscription_tier"] or "free",
        created_at=user_row["created_at"],
    )


def insight_record_from_row(row) -> PersistedInsightRecord:
    """users.round_insights row -> PersistedInsightRecord."""
    return PersistedInsightRecord(
        round_id=str(row["round_id"]),
        user_id=str(row["user_id"]),
        messages=_json_value(row["messages"], []),
        levels=_json_value(row["levels"], []),
        outcomes=_json_value(row["outcomes"], []),
        variant_offset=row["variant_offset"] or 0,
        generated_at=row["generated_at"],
        model_used=row["model_used"],
        onboarding=bool(row["onboarding"]),
        trace=_json_value(row["trace"], {}),
    )


# ================================================================
# Model -> Row dict (writes)
# ================================================================

def insight_record_to_row(record: PersistedInsightRecord) -> dict:
    """PersistedInsightRecord -> dict for users.round_insights UPSERT."""
    return {
        "round_id": UUID(record.round_id),
        "user_id": UUID(record.user_id),
        "messages": json.dumps(record.messages),
        "levels": json.dumps([level.value for level in record.levels]),
        "outcomes": json.dumps(record.outcomes),
        "variant_offset": record.variant_offset,
        "generated_at": record.generated_at,
        "model_used": record.model_used,
        "onboarding": record.onboarding,
        "trace": json.dumps(record.trace, default=str),
    }
