"""SQLAlchemy implementation of AddressRepository."""

from __future__ import annotations

from sqlalchemy import select

from storefront.domain.model.customer import Address, AddressFields
from storefront.domain.repository.address_repository import AddressRepository
from storefront.infrastructure.persistence.sql_repository import SqlCandidateRepository
from storefront.infrastructure.persistence.tables import AddressRow, UserRow


class SqlAddressRepository(SqlCandidateRepository, AddressRepository):
    row_class = AddressRow
    owner_row_class = UserRow
    owner_column = "user_id"
    flag_column = "is_default"

    def get(self, user_id: int, address_id: int) -> Address | None:
        row = self._session.get(AddressRow, address_id)
        if row is None or row.user_id != user_id:
            return None
        return self._to_domain(row)

    def list_for_user(self, user_id: int) -> list[Address]:
        stmt = (
            select(AddressRow)
            .where(AddressRow.user_id == user_id)
            .order_by(AddressRow.is_default.desc(), AddressRow.id.desc())
        )
        return [self._to_domain(row) for row in self._session.execute(stmt).scalars()]

    def add(self, address: Address) -> Address:
        row = AddressRow(user_id=address.user_id, is_default=False, **self._fields(address))
        self._session.add(row)
        self._flush()
        address.id = row.id
        address.is_default = False
        return address

    def update(self, address: Address) -> None:
        row = self._session.get(AddressRow, address.id)
        if row is None:
            return
        for name, value in self._fields(address).items():
            setattr(row, name, value)
        row.updated_at = address.updated_at
        self._flush()

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _fields(address: Address) -> dict:
        f = address.fields
        return {
            "name": f.name,
            "street": f.street,
            "city": f.city,
            "state": f.state,
            "postal_code": f.postal_code,
            "country": f.country,
            "phone": f.phone,
        }

    @staticmethod
    def _to_domain(row: AddressRow) -> Address:
        return Address(
            id=row.id,
            user_id=row.user_id,
            fields=AddressFields(
                name=row.name,
                street=row.street,
                city=row.city,
                state=row.state,
                postal_code=row.postal_code,
                country=row.country,
                phone=row.phone,
            ),
            is_default=row.is_default,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )
