# -*- coding: utf-8 -*-
"""
Alert headers read by the client to show notifications after a mutation.
"""
from __future__ import annotations
from typing import Dict

from django.conf import settings


def _app_name() -> str:
    return getattr(settings, "CLIENT_APP_NAME", "dashboardApp")


def alert(message: str, param: str) -> Dict[str, str]:
    app = _app_name()
    return {f"X-{app}-alert": message, f"X-{app}-params": param}


def entity_creation_alert(entity_name: str, param) -> Dict[str, str]:
    return alert(f"{_app_name()}.{entity_name}.created", str(param))


def entity_update_alert(entity_name: str, param) -> Dict[str, str]:
    return alert(f"{_app_name()}.{entity_name}.updated", str(param))


def entity_deletion_alert(entity_name: str, param) -> Dict[str, str]:
    return alert(f"{_app_name()}.{entity_name}.deleted", str(param))


def failure_alert(entity_name: str, error_key: str) -> Dict[str, str]:
    app = _app_name()
    return {f"X-{app}-error": f"error.{error_key}", f"X-{app}-params": entity_name}
