from __future__ import annotations

import logging
from datetime import date
from functools import wraps
from typing import Optional

from flask import jsonify, request

from ..core.exceptions import ConfigurationMissing, InvalidInput, StorageError
from .datetime_utils import parse_iso_date, today_local

logger = logging.getLogger(__name__)

GENERIC_ERROR = "Something went wrong. Please try again."


def api_view(view):
    """Translate domain errors into JSON responses.

    Storage and unexpected failures surface as one generic retry message.
    """

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except InvalidInput as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except ConfigurationMissing as e:
            return jsonify({"success": True, "configured": False, "message": str(e), "data": []}), 200
        except StorageError:
            logger.error("Storage error in %s", request.path)
            return jsonify({"success": False, "message": GENERIC_ERROR}), 503
        except Exception:
            logger.exception("Unexpected error in %s", request.path)
            return jsonify({"success": False, "message": GENERIC_ERROR}), 500

    return wrapper


def date_arg(name: str, default: Optional[date] = None) -> Optional[date]:
    value = request.args.get(name)
    if not value:
        return default
    return parse_iso_date(value)


def int_arg(name: str, default: int) -> int:
    value = request.args.get(name)
    if value in (None, ""):
        return default
    try:
        return int(value)
    except ValueError:
        raise InvalidInput(f"{name} must be a number")


def year_month_args() -> tuple[int, int]:
    today = today_local()
    return int_arg("year", today.year), int_arg("month", today.month)


def json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise InvalidInput("Request body must be a JSON object")
    return data
