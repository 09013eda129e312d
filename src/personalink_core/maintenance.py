from __future__ import annotations

import logging
from datetime import datetime, timedelta

from personalink_core.normalize import utc_now
from personalink_core.storage.base import LinkStore

logger = logging.getLogger(__name__)


def expire_new_flags(
    store: LinkStore,
    *,
    max_age: timedelta = timedelta(days=7),
    now: datetime | None = None,
) -> int:
    cutoff = (now or utc_now()) - max_age
    cleared = store.clear_new_flags(created_before=cutoff)
    logger.info("Cleared the new flag on %d links created before %s", cleared, cutoff.isoformat())
    return cleared
