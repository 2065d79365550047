from fastapi import APIRouter, Depends
from sqlalchemy import text

from civicgate.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from civicgate.depends import get_unit_of_work

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check(uow: SqlAlchemyUnitOfWork = Depends(get_unit_of_work)):
    """Liveness plus a trivial database round trip."""
    await uow.session.execute(text("SELECT 1"))
    return {"status": "ok"}
