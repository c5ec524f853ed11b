"""Dependency injection for FastAPI endpoints"""

import logging
from datetime import date
from typing import Optional
from fastapi import Header, HTTPException, Query, Request

from finboard.domain.exceptions import InvalidMonthError
from finboard.utils.date_utils import month_id, month_start, parse_month_id


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_user_id(x_user_id: str = Header(..., min_length=1, description="Caller identity set by the auth proxy")) -> str:
    """Identity of the caller; authentication happens upstream"""
    return x_user_id


def get_target_month(
    month: Optional[str] = Query(None, description="Target month as YYYY-MM, defaults to current month"),
) -> date:
    """First day of the requested month"""
    if month is None:
        return month_start(date.today())
    try:
        return parse_month_id(month)
    except InvalidMonthError as e:
        raise HTTPException(status_code=400, detail=str(e))


def clamp_to_current_month(target_month: date, today: Optional[date] = None) -> date:
    """Budget views never look past the current month; later months fall back to it"""
    current = month_start(today or date.today())
    if target_month > current:
        logging.warning(
            "Future month requested, using current month",
            extra={"requested_month": month_id(target_month), "month": month_id(current)},
        )
        return current
    return target_month
