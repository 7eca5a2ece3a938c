"""
Parcel database model.

Maps the single ``parcel`` table. Timestamps are stored as RFC3339 text.
"""

from sqlalchemy import Column, Integer, Text
from tracker.app.db.session import Base


class ParcelRecord(Base):
    """
    Row of the parcel table.

    ``number`` is assigned by the database on insert and never updated.
    """
    __tablename__ = "parcel"

    number = Column(Integer, primary_key=True, autoincrement=True)

    # Ownership - many parcels per client
    client = Column(Integer, nullable=False, index=True)

    status = Column(Text, nullable=False)
    address = Column(Text, nullable=False)

    # RFC3339 UTC, e.g. 2024-03-01T10:00:00Z
    created_at = Column(Text, nullable=False)

    def __repr__(self):
        return f"<ParcelRecord(number={self.number}, client={self.client}, status='{self.status}')>"
