# alert models - advisory messages produced by the alert engine

from enum import Enum
from pydantic import BaseModel, Field


class AlertKind(str, Enum):
    LOW_MOOD = "low_mood"
    HIGH_ANXIETY = "high_anxiety"
    SLEEP_DEFICIT = "sleep_deficit"
    LOW_ADHERENCE = "low_adherence"
    PSYCHOTIC_SYMPTOMS = "psychotic_symptoms"
    ALL_CLEAR = "all_clear"
    NO_DATA = "no_data"


class AlertSeverity(str, Enum):
    CRITICAL = "critical"
    WARNING = "warning"
    INFO = "info"
    POSITIVE = "positive"
    NEUTRAL = "neutral"


class Alert(BaseModel):
    """one advisory alert. message is a translation key for the frontend"""
    kind: AlertKind
    severity: AlertSeverity
    message: str
    params: dict[str, float] = Field(default_factory=dict)
