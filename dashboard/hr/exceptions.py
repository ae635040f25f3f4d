# -*- coding: utf-8 -*-
"""
Alert exceptions raised by the HR resources and the DRF exception handler
that renders them.
"""
from __future__ import annotations
import logging

from rest_framework import status
from rest_framework.exceptions import APIException, NotFound
from rest_framework.views import exception_handler

from hr.utils.headers import failure_alert

logger = logging.getLogger(__name__)


class BadRequestAlertException(APIException):
    """400 carrying the entity name and a machine-readable error key."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Bad request"
    default_code = "bad_request"

    def __init__(self, detail: str, entity_name: str, error_key: str):
        super().__init__(detail)
        self.entity_name = entity_name
        self.error_key = error_key


class EntityNotFoundError(NotFound):
    def __init__(self, entity_name: str, entity_id):
        super().__init__(f"{entity_name} {entity_id} not found")
        self.entity_name = entity_name
        self.entity_id = entity_id


def alert_exception_handler(exc, context):
    response = exception_handler(exc, context)
    if response is None or not isinstance(exc, BadRequestAlertException):
        return response

    logger.debug("Bad request on %s: %s (%s)", exc.entity_name, exc.detail, exc.error_key)
    response.data = {
        "title": str(exc.detail),
        "status": exc.status_code,
        "entityName": exc.entity_name,
        "errorKey": exc.error_key,
        "message": f"error.{exc.error_key}",
        "params": exc.entity_name,
    }
    for name, value in failure_alert(exc.entity_name, exc.error_key).items():
        response[name] = value
    return response
