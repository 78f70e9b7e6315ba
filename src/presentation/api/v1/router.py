from fastapi import APIRouter

from .billing import billing_router
from .contracts import contracts_router
from .health import health_router

router = APIRouter()

router.include_router(health_router, tags=["Health"])
router.include_router(billing_router, tags=["Billing"])
router.include_router(contracts_router, tags=["Contracts"])
