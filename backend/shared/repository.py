"""
Base repository class for document access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access, access-mode checks and timestamp bookkeeping.
Entity repositories build their public operations from the protected
helpers defined here.
"""

import functools
import logging
from collections.abc import Mapping
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, ClassVar, Generic, Optional, TypeVar, Union

from pydantic import BaseModel
from supabase import AsyncClient

from .database import AccessMode
from .exceptions import (
    DocumentNotFoundError,
    FoodOrderError,
    PrivilegedOperationError,
    StoreError,
)
from .models import RESERVED_FIELDS, Document

logger = logging.getLogger(__name__)


T = TypeVar("T", bound=Document)

# Input accepted by create/update: a plain mapping or a pydantic input model
DocumentInput = Union[Mapping[str, Any], BaseModel]


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def privileged(method):
    """
    Mark a repository coroutine as an administrative operation.

    Restricted repositories raise PrivilegedOperationError instead of
    issuing the query.
    """

    @functools.wraps(method)
    async def wrapper(self: "BaseRepository", *args, **kwargs):
        if self.access_mode is not AccessMode.PRIVILEGED:
            raise PrivilegedOperationError(self.table, method.__name__)
        return await method(self, *args, **kwargs)

    return wrapper


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for document operations:
    - Supabase client access via self._db
    - The access mode the client was built for
    - Layer-assigned created_at/updated_at stamps
    - Store faults wrapped in StoreError

    Subclasses set `model` and `default_table`, then expose the operations
    their entity supports.

    Example:
        class CategoryRepository(BaseRepository[Category]):
            model = Category
            default_table = "categories"

            async def list_all(self) -> list[Category]:
                return await self._select()

    Note: Repositories do NOT check ownership. Restricted repositories
    rely on the store's row level security for that.
    """

    model: ClassVar[type[Document]] = Document
    default_table: ClassVar[str] = ""

    def __init__(
        self,
        db: AsyncClient,
        access_mode: AccessMode = AccessMode.PRIVILEGED,
        table: Optional[str] = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Async Supabase client. Service-role for PRIVILEGED,
                user-authenticated for RESTRICTED.
            access_mode: Which store context `db` belongs to.
            table: Collection name, defaults to the subclass' default_table.
            clock: Source of timestamps for created_at/updated_at.
        """
        self._db = db
        self.access_mode = access_mode
        self.table = table or self.default_table
        self._clock = clock
        self._last_stamp: Optional[datetime] = None

    @property
    def is_privileged(self) -> bool:
        return self.access_mode is AccessMode.PRIVILEGED

    # -------------------------------------------------------------------------
    # Payload helpers
    # -------------------------------------------------------------------------

    def _now(self) -> str:
        """
        Next timestamp for a write, as an ISO string.

        Stamps from one repository never repeat or go backwards, even when
        the clock is coarser than the gap between two writes. Writes through
        different repositories or processes rely on the clock alone.
        """
        now = self._clock()
        if self._last_stamp is not None and now <= self._last_stamp:
            now = self._last_stamp + timedelta(microseconds=1)
        self._last_stamp = now
        return now.isoformat()

    @staticmethod
    def _payload(data: DocumentInput) -> dict[str, Any]:
        """Turn caller input into a field map without layer-owned fields."""
        if isinstance(data, BaseModel):
            fields = data.model_dump(mode="json", exclude_unset=True)
        else:
            fields = dict(data)
        return {k: v for k, v in fields.items() if k not in RESERVED_FIELDS}

    def _to_model(self, row: dict[str, Any]) -> T:
        """Map a stored row to the repository's model."""
        return self.model.model_validate({**row, "id": str(row["id"])})

    async def _execute(self, operation: str, query: Any) -> Any:
        """Run a query builder, wrapping store faults in StoreError."""
        try:
            return await query.execute()
        except FoodOrderError:
            raise
        except Exception as e:
            logger.error(f"Store {operation} on {self.table} failed: {e}")
            raise StoreError(str(e), operation=operation, table=self.table) from e

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    async def _insert(
        self,
        data: DocumentInput,
        document_id: Optional[str] = None,
        defaults: Optional[dict[str, Any]] = None,
    ) -> T:
        """
        Insert a new document stamped with created_at == updated_at.

        Args:
            data: Document fields.
            document_id: Explicit id, or None to let the store generate one.
            defaults: Fields to apply when the caller left them falsy.

        Returns:
            The stored document including id and timestamps.
        """
        document = self._payload(data)
        for field, value in (defaults or {}).items():
            document[field] = document.get(field) or value

        now = self._now()
        document["created_at"] = now
        document["updated_at"] = now
        if document_id is not None:
            document["id"] = document_id

        result = await self._execute("create", self._db.table(self.table).insert(document))
        if not result.data:
            raise StoreError(
                "Store returned no document for insert",
                operation="create",
                table=self.table,
            )

        created = self._to_model(result.data[0])
        logger.debug(f"Created {self.table}/{created.id}")
        return created

    async def find_by_id(self, document_id: str) -> Optional[T]:
        """
        Get a document by ID.

        Returns:
            The document, or None if it doesn't exist.
        """
        query = self._db.table(self.table).select("*").eq("id", document_id)
        result = await self._execute("find_by_id", query)

        if not result.data:
            return None

        return self._to_model(result.data[0])

    async def _select(
        self,
        filters: Optional[dict[str, Any]] = None,
        order_by: Optional[str] = None,
        descending: bool = False,
        limit: Optional[int] = None,
    ) -> list[T]:
        """
        Query documents with equality filters and optional ordering.

        Without order_by the store decides the order.
        """
        query = self._db.table(self.table).select("*")
        for field, value in (filters or {}).items():
            query = query.eq(field, value)
        if order_by:
            query = query.order(order_by, desc=descending)
        if limit is not None:
            query = query.limit(limit)

        result = await self._execute("select", query)
        return [self._to_model(row) for row in result.data]

    async def update(self, document_id: str, data: DocumentInput) -> None:
        """
        Overlay fields onto an existing document and refresh updated_at.

        The new updated_at is later than every stamp this repository has
        written before, including the created_at of a document it created.

        Args:
            document_id: The document ID.
            data: Partial field map; id and timestamps in it are ignored.

        Raises:
            DocumentNotFoundError: If the store updated no document.
        """
        changes = self._payload(data)
        changes["updated_at"] = self._now()

        query = self._db.table(self.table).update(changes).eq("id", document_id)
        result = await self._execute("update", query)

        if not result.data:
            raise DocumentNotFoundError(self.table, document_id)

        logger.debug(f"Updated {self.table}/{document_id}: {sorted(changes)}")

    async def _delete(self, document_id: str) -> None:
        """Delete a document. Deleting a missing document is not an error."""
        query = self._db.table(self.table).delete().eq("id", document_id)
        await self._execute("delete", query)
        logger.info(f"Deleted {self.table}/{document_id}")
