"""
Parcel persistence (single table).

ParcelStore wraps a caller-owned AsyncSession. Every public operation runs
one statement against the ``parcel`` table and commits it; failures are
rolled back and raised as StorageError.
"""

from enum import Enum
from typing import List, NoReturn

from sqlalchemy import select, update, delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from tracker.app.core.exceptions import ParcelNotFoundError, StorageError
from tracker.app.core.observability import logger, track_operation
from tracker.app.models.parcel import ParcelRecord
from tracker.app.schemas.parcel import Parcel

# SQLite INTEGER and Postgres BIGINT are signed 64-bit
INTEGER_MIN = -(2 ** 63)
INTEGER_MAX = 2 ** 63 - 1


def _fits_integer_column(value: int) -> bool:
    return INTEGER_MIN <= value <= INTEGER_MAX


class ParcelStore:
    """
    Create, read, update and delete parcels.

    Missing numbers are not an error for set_address, set_status and
    delete: those affect zero rows and return normally.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def add(self, parcel: Parcel) -> int:
        """
        Insert a parcel and return the number assigned by the database.

        ``parcel.number`` is ignored on input.
        """
        with track_operation("add", client=parcel.client) as log_data:
            record = ParcelRecord(
                client=parcel.client,
                status=parcel.status,
                address=parcel.address,
                created_at=parcel.created_at,
            )
            try:
                self.db.add(record)
                await self.db.flush()
                number = record.number
                await self.db.commit()
            except SQLAlchemyError as exc:
                await self._rollback("add", exc)

            log_data["number"] = number
            return number

    async def get(self, number: int) -> Parcel:
        with track_operation("get", number=number):
            if not _fits_integer_column(number):
                raise ParcelNotFoundError(number)

            try:
                result = await self.db.execute(
                    select(ParcelRecord)
                    .where(ParcelRecord.number == number)
                    .execution_options(populate_existing=True)
                )
                record = result.scalar_one_or_none()
            except SQLAlchemyError as exc:
                await self._rollback("get", exc)

            if record is None:
                raise ParcelNotFoundError(number)

            return Parcel.model_validate(record)

    async def get_by_client(self, client: int) -> List[Parcel]:
        """Return every stored parcel of ``client``; order is unspecified."""
        with track_operation("get_by_client", client=client) as log_data:
            if not _fits_integer_column(client):
                log_data["count"] = 0
                return []

            try:
                result = await self.db.execute(
                    select(ParcelRecord)
                    .where(ParcelRecord.client == client)
                    .execution_options(populate_existing=True)
                )
                records = result.scalars().all()
            except SQLAlchemyError as exc:
                await self._rollback("get_by_client", exc)

            log_data["count"] = len(records)
            return [Parcel.model_validate(r) for r in records]

    async def set_address(self, number: int, address: str) -> None:
        await self._update_field("set_address", number, address=address)

    async def set_status(self, number: int, status: str) -> None:
        """Overwrite the status. Any transition is accepted."""
        if isinstance(status, Enum):
            status = status.value
        await self._update_field("set_status", number, status=status)

    async def delete(self, number: int) -> None:
        with track_operation("delete", number=number) as log_data:
            if not _fits_integer_column(number):
                log_data["rows"] = 0
                return

            try:
                result = await self.db.execute(
                    delete(ParcelRecord).where(ParcelRecord.number == number)
                )
                await self.db.commit()
            except SQLAlchemyError as exc:
                await self._rollback("delete", exc)

            log_data["rows"] = result.rowcount
            if result.rowcount == 0:
                logger.debug("Delete matched no parcel", extra={"number": number})

    async def _update_field(self, operation: str, number: int, **values) -> None:
        with track_operation(operation, number=number) as log_data:
            if not _fits_integer_column(number):
                log_data["rows"] = 0
                return

            try:
                result = await self.db.execute(
                    update(ParcelRecord)
                    .where(ParcelRecord.number == number)
                    .values(**values)
                )
                await self.db.commit()
            except SQLAlchemyError as exc:
                await self._rollback(operation, exc)

            log_data["rows"] = result.rowcount
            if result.rowcount == 0:
                logger.debug("Update matched no parcel", extra={"number": number, "operation": operation})

    async def _rollback(self, operation: str, exc: SQLAlchemyError) -> NoReturn:
        """Roll back the failed statement and raise it as a StorageError."""
        try:
            await self.db.rollback()
        except SQLAlchemyError as rollback_exc:
            logger.error(
                "Rollback Failed",
                extra={"operation": operation, "error": type(rollback_exc).__name__},
            )
        raise StorageError(operation, exc) from exc
