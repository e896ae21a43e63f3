"""Network host database model."""
from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from splitr.core.database import Base


class NetworkHost(Base):
    """A destination that should bypass the VPN tunnel of its network."""
    __tablename__ = "network_hosts"
    __table_args__ = (
        UniqueConstraint("network_id", "address", name="uq_network_hosts_network_id_address"),
    )

    id = Column(Integer, primary_key=True, index=True)
    network_id = Column(
        Integer, ForeignKey("networks.id", ondelete="CASCADE"), nullable=False, index=True
    )
    address = Column(String(255), nullable=False)  # IPv4 address or hostname
    description = Column(String(255), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    # Relationships
    network = relationship("Network", back_populates="hosts")
    setups = relationship(
        "NetworkHostSetup",
        back_populates="network_host",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
