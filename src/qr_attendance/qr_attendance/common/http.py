from __future__ import annotations

import logging
from functools import wraps

from flask import jsonify

from ..core.exceptions import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def json_error(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def api_errors(view):
    """Map domain errors of a JSON view to 400/404; anything else is a logged 500."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except ValidationError as e:
            return json_error(str(e), 400)
        except NotFoundError as e:
            return json_error(str(e), 404)
        except Exception:
            logger.exception("Unhandled error in %s", view.__name__)
            return json_error("Error del sistema", 500)

    return wrapper
