"""
Elected Official Menu Permissions Use Cases

Read and replace the admin menu allow-list of an elected official.
"""

from typing import List
from uuid import UUID

from civicgate.app.services.unit_of_work import UnitOfWork
from civicgate.domain.actor import Actor, ElectedOfficialActor
from civicgate.domain.entities import AdminMenuCode, AuditEvent
from civicgate.domain.result import Error, Result, Return
from .dtos import MenuPermissionsResponse


def _ordered(codes) -> List[AdminMenuCode]:
    granted = set(codes)
    return [code for code in AdminMenuCode if code in granted]


class GetMenuPermissionsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, tenant_id: UUID, official_id: UUID) -> Result[MenuPermissionsResponse]:
        async with self.uow:
            official = await self.uow.elected_officials.get_by_id(official_id)
            if official is None or official.tenant_id != tenant_id:
                return Return.err(
                    Error("ELECTED_OFFICIAL_NOT_FOUND", "Elected official not found")
                )

            codes = await self.uow.elected_officials.get_menu_permissions(official.id)
            return Return.ok(
                MenuPermissionsResponse(
                    elected_official_id=official.id,
                    has_full_access=official.has_full_access,
                    menu_permissions=_ordered(codes),
                )
            )


class UpdateMenuPermissionsUseCase:
    """
    Business Rules:
    - has_full_access grants every menu regardless of the list
    - The list is replaced as a whole (duplicates collapse)
    - Takes effect on the official's next request
    - An elected official cannot change their own permissions
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        tenant_id: UUID,
        official_id: UUID,
        has_full_access: bool,
        menu_codes: List[AdminMenuCode],
        updated_by: Actor,
    ) -> Result[MenuPermissionsResponse]:
        if isinstance(updated_by, ElectedOfficialActor) and updated_by.id == official_id:
            return Return.err(Error("FORBIDDEN", "Cannot change your own permissions"))

        async with self.uow:
            official = await self.uow.elected_officials.get_by_id(official_id)
            if official is None or official.tenant_id != tenant_id:
                return Return.err(
                    Error("ELECTED_OFFICIAL_NOT_FOUND", "Elected official not found")
                )

            official.has_full_access = has_full_access
            await self.uow.elected_officials.update(official)
            codes = await self.uow.elected_officials.set_menu_permissions(
                official.id, _ordered(menu_codes)
            )

            await self.uow.audit_events.create(
                AuditEvent(
                    tenant_id=tenant_id,
                    actor_type=updated_by.actor_type,
                    actor_id=getattr(updated_by, "id", None),
                    action="elected_official_permissions_updated",
                    event_metadata={
                        "elected_official_id": str(official.id),
                        "has_full_access": has_full_access,
                        "menu_permissions": [code.value for code in codes],
                    },
                )
            )

            await self.uow.commit()

            return Return.ok(
                MenuPermissionsResponse(
                    elected_official_id=official_id,
                    has_full_access=has_full_access,
                    menu_permissions=_ordered(codes),
                )
            )
