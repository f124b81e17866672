# app/domains/inv/tasks.py

"""
'inv' 도메인의 ARQ 백그라운드 작업입니다. (ArqWorkerSettings 의 cron 으로 실행)
"""

import logging
from typing import Any, Dict, Optional

from app.core.config import settings
from app.core.database import get_async_session_context
from app.domains.inv import crud as inv_crud

logger = logging.getLogger(__name__)


async def report_expiring_lots_task(ctx, days: Optional[int] = None) -> Dict[str, Any]:
    """
    유통기한이 임박한 로트와 이미 지난 로트를 집계해 로그로 남깁니다.
    재고 데이터는 변경하지 않습니다.
    """
    days = settings.EXPIRY_ALERT_DAYS if days is None else days
    async with get_async_session_context() as db:
        expiring = await inv_crud.lot.get_expiring(db, days=days)
        expired = await inv_crud.lot.get_expired(db)

    for item in expiring:
        logger.warning(
            "Lot %s (record=%s) expires on %s with %s remaining",
            item.lot_number, item.inventory_record_id, item.expiry_date, item.current_quantity,
        )
    for item in expired:
        logger.error(
            "Lot %s (record=%s) expired on %s with %s remaining",
            item.lot_number, item.inventory_record_id, item.expiry_date, item.current_quantity,
        )

    logger.info("Expiry report: %d expiring within %d days, %d expired", len(expiring), days, len(expired))
    return {
        "status": "success",
        "expiring_lot_ids": [item.id for item in expiring],
        "expired_lot_ids": [item.id for item in expired],
    }
