"""Network database model."""
from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from splitr.core.database import Base


class Network(Base):
    """A VPN network; its name must equal the OS VPN service name."""
    __tablename__ = "networks"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False, unique=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    # Relationships
    hosts = relationship(
        "NetworkHost",
        back_populates="network",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
