"""
Storage for applied routes (network host setups).

Bulk statements are split into chunks so a single statement never exceeds
the backing store's bound parameter limit. Chunks run sequentially and each
one is committed on its own: a failure leaves earlier chunks committed.
"""
import logging
from datetime import datetime, timezone
from typing import List, Optional, Sequence

from sqlalchemy import delete, insert, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from splitr.core.config import settings
from splitr.core.errors import StorageError
from splitr.models.network_host import NetworkHost
from splitr.models.network_host_setup import NetworkHostSetup
from splitr.utils.chunking import execute_in_chunks

logger = logging.getLogger(__name__)


class NetworkHostSetupStore:
    """Chunked batch persistence for NetworkHostSetup rows."""

    def __init__(
        self,
        db: Session,
        add_chunk_size: Optional[int] = None,
        delete_chunk_size: Optional[int] = None,
    ):
        """
        Args:
            db: Database session
            add_chunk_size: Rows per INSERT (defaults to settings.ADD_BATCH_CHUNK_SIZE)
            delete_chunk_size: IDs per DELETE (defaults to settings.DELETE_BATCH_CHUNK_SIZE)
        """
        self.db = db
        self.add_chunk_size = add_chunk_size or settings.ADD_BATCH_CHUNK_SIZE
        self.delete_chunk_size = delete_chunk_size or settings.DELETE_BATCH_CHUNK_SIZE

    def add_batch(self, setups: Sequence[NetworkHostSetup]) -> None:
        """Insert all setups, ``add_chunk_size`` rows per statement."""
        if not setups:
            return

        now = datetime.now(timezone.utc)

        def add_chunk(chunk: List[NetworkHostSetup]) -> None:
            rows = [
                {
                    "network_host_id": setup.network_host_id,
                    "network_host_ip": setup.network_host_ip,
                    "subnet_mask": setup.subnet_mask,
                    "router": setup.router,
                    "created_at": now,
                }
                for setup in chunk
            ]
            self._execute("failed to add batch", insert(NetworkHostSetup), rows)

        chunks = execute_in_chunks(setups, self.add_chunk_size, add_chunk)
        logger.info(f"Added {len(setups)} network host setup(s) in {chunks} chunk(s)")

    def delete_batch_by_network_host_ids(self, network_host_ids: Sequence[int]) -> None:
        """Delete every setup whose network_host_id is in the given set."""
        if not network_host_ids:
            return

        unique_ids = list(dict.fromkeys(network_host_ids))

        def delete_chunk(chunk: List[int]) -> None:
            statement = (
                delete(NetworkHostSetup)
                .where(NetworkHostSetup.network_host_id.in_(chunk))
                .execution_options(synchronize_session=False)
            )
            self._execute("failed to delete batch", statement)

        chunks = execute_in_chunks(unique_ids, self.delete_chunk_size, delete_chunk)
        logger.info(f"Deleted network host setups of {len(unique_ids)} host(s) in {chunks} chunk(s)")

    def list_by_network_host_ids(self, network_host_ids: Sequence[int]) -> List[NetworkHostSetup]:
        """Return setups of the given hosts, ordered by insertion."""
        if not network_host_ids:
            return []

        setups: List[NetworkHostSetup] = []

        def select_chunk(chunk: List[int]) -> None:
            statement = select(NetworkHostSetup).where(NetworkHostSetup.network_host_id.in_(chunk))
            setups.extend(self.db.scalars(statement).all())

        try:
            execute_in_chunks(list(dict.fromkeys(network_host_ids)), self.delete_chunk_size, select_chunk)
        except SQLAlchemyError as e:
            raise StorageError(f"failed to list network host setups: {e}") from e

        return sorted(setups, key=lambda setup: setup.id)

    def list_by_network_id(self, network_id: int) -> List[NetworkHostSetup]:
        """Return setups of every host of a network."""
        statement = (
            select(NetworkHostSetup)
            .join(NetworkHost, NetworkHost.id == NetworkHostSetup.network_host_id)
            .where(NetworkHost.network_id == network_id)
            .order_by(NetworkHostSetup.id)
        )
        try:
            return list(self.db.scalars(statement).all())
        except SQLAlchemyError as e:
            raise StorageError(f"failed to list network host setups: {e}") from e

    def _execute(self, error_message: str, statement, params=None) -> None:
        try:
            if params is None:
                self.db.execute(statement)
            else:
                self.db.execute(statement, params)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"{error_message}: {e}", exc_info=True)
            raise StorageError(f"{error_message}: {e}") from e
