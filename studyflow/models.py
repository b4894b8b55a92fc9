"""Database models."""

from datetime import datetime

from sqlalchemy import DateTime, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from studyflow.database import Base


class StorageRecord(Base):
    """Key-value record holding one serialized collection."""

    __tablename__ = "storage_records"

    key: Mapped[str] = mapped_column(String(100), primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    def __repr__(self) -> str:
        """String representation of StorageRecord."""
        return f"<StorageRecord(key='{self.key}', size={len(self.value)})>"
