"""
Service for the host catalog.

Catalog hosts are saved addresses that the frontend offers when adding
hosts to a network; they are never routed themselves.
"""
import logging
from typing import List, Optional

from sqlalchemy import func, or_, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from splitr.core.errors import HostAlreadyExistsError, HostNotFoundError, StorageError
from splitr.models.host import Host

logger = logging.getLogger(__name__)


class HostService:

    def __init__(self, db: Session):
        self.db = db

    def add(self, address: str, description: Optional[str] = None) -> Host:
        """
        Save a host to the catalog.

        Raises:
            HostAlreadyExistsError: If the address is already saved
        """
        host = Host(address=address, description=description)
        try:
            self.db.add(host)
            self.db.commit()
            self.db.refresh(host)
        except IntegrityError as e:
            self.db.rollback()
            raise HostAlreadyExistsError(address) from e
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StorageError(f"failed to add host: {e}") from e

        logger.info(f"Added host {address} (ID: {host.id})")
        return host

    def list(self, search: Optional[str] = None) -> List[Host]:
        """List saved hosts ordered by description, falling back to address."""
        statement = select(Host)

        if search:
            term = f"%{search.upper()}%"
            statement = statement.where(
                or_(
                    func.upper(Host.address).like(term),
                    func.upper(Host.description).like(term),
                )
            )

        statement = statement.order_by(
            func.upper(func.coalesce(Host.description, Host.address)).asc(),
            Host.id.asc(),
        )

        try:
            return list(self.db.scalars(statement).all())
        except SQLAlchemyError as e:
            raise StorageError(f"failed to list hosts: {e}") from e

    def delete(self, host_id: int) -> None:
        host = self.db.get(Host, host_id)
        if host is None:
            raise HostNotFoundError(host_id)

        try:
            self.db.delete(host)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StorageError(f"failed to delete host: {e}") from e

        logger.info(f"Deleted host {host_id}")
