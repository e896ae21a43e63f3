"""Host catalog database model."""
from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.sql import func

from splitr.core.database import Base


class Host(Base):
    """A saved address, independent of any network."""
    __tablename__ = "hosts"

    id = Column(Integer, primary_key=True, index=True)
    address = Column(String(255), nullable=False, unique=True)  # IPv4 address or hostname
    description = Column(String(255), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
