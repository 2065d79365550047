from .block_tenant_use_case import BlockTenantUseCase, TenantBlockResponse, UnblockTenantUseCase
from .get_tenant_quotas_use_case import GetTenantQuotasUseCase, TenantQuotasResponse

__all__ = [
    "BlockTenantUseCase",
    "GetTenantQuotasUseCase",
    "TenantBlockResponse",
    "TenantQuotasResponse",
    "UnblockTenantUseCase",
]
