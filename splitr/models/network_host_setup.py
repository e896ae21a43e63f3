"""Applied route database model."""
from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from splitr.core.database import Base


class NetworkHostSetup(Base):
    """
    Snapshot of one host address paired with the local subnet facts it was
    routed through. Rows are inserted and deleted in bulk, never updated.
    """
    __tablename__ = "network_host_setups"

    id = Column(Integer, primary_key=True, autoincrement=True)
    network_host_id = Column(
        Integer, ForeignKey("network_hosts.id", ondelete="CASCADE"), nullable=False, index=True
    )
    network_host_ip = Column(String(255), nullable=False)
    subnet_mask = Column(String(255), nullable=False)
    router = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    # Relationships
    network_host = relationship("NetworkHost", back_populates="setups")

    def route_arguments(self) -> list:
        """Positional (ip, mask, router) triple for networksetup."""
        return [self.network_host_ip, self.subnet_mask, self.router]
