"""Pydantic schemas for persisted study records.

Field names are serialized in camelCase and timestamps as ISO-8601
strings, so each collection is stored as a JSON array such as
``[{"id": "...", "name": "...", "studiedHours": 1.5, ...}]``.
"""

from datetime import UTC, datetime
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, TypeAdapter
from pydantic.alias_generators import to_camel

from studyflow.domain.study.entities import Priority


def _assume_utc(value: datetime) -> datetime:
    """Interpret naive timestamps as UTC."""
    return value if value.tzinfo else value.replace(tzinfo=UTC)


Timestamp = Annotated[datetime, AfterValidator(_assume_utc)]


class StoredRecord(BaseModel):
    """Base schema for persisted records."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SubjectRecord(StoredRecord):
    """Schema for a persisted Subject."""

    id: str = Field(..., min_length=1)
    name: str
    color: str
    studied_hours: float = Field(..., ge=0)
    target_hours: float = Field(..., gt=0)
    last_studied: Timestamp | None = Field(None, description="Omitted until time is first logged")


class AssignmentRecord(StoredRecord):
    """Schema for a persisted Assignment."""

    id: str = Field(..., min_length=1)
    title: str
    subject: str
    deadline: Timestamp
    priority: Priority = Priority.MEDIUM
    completed: bool = False


class StudySessionRecord(StoredRecord):
    """Schema for a persisted StudySession."""

    id: str = Field(..., min_length=1)
    subject_id: str = Field(..., min_length=1)
    subject_name: str
    duration: float = Field(..., gt=0)
    date: Timestamp


SubjectRecordList = TypeAdapter(list[SubjectRecord])
AssignmentRecordList = TypeAdapter(list[AssignmentRecord])
StudySessionRecordList = TypeAdapter(list[StudySessionRecord])
