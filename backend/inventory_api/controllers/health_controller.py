"""
Health controller - store connectivity check for load balancer target groups.
"""

import logging

from flask import Blueprint, jsonify
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from inventory_api.db.session import get_engine

logger = logging.getLogger(__name__)

health_bp = Blueprint("health", __name__)


def check_store_connection() -> bool:
    """Run a trivial query against the store."""
    try:
        with get_engine().connect() as connection:
            connection.execute(text("SELECT 1"))
        return True
    except SQLAlchemyError as e:
        logger.error(
            "Store connection failed",
            extra={"context": {"error": str(e)}},
        )
        return False


@health_bp.route("/health", methods=["GET"])
def health_check():
    """
    Report whether the API can reach its store.

    Status codes:
        200: store reachable
        503: store unreachable
    """
    db_status = check_store_connection()
    return jsonify(
        {
            "status": "healthy" if db_status else "unhealthy",
            "database": "connected" if db_status else "disconnected",
        }
    ), (200 if db_status else 503)
