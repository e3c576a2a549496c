"""
Alert headers attached to mutating responses so API clients can show notifications.
"""

import logging

from order_service.config import get_settings

logger = logging.getLogger(__name__)
settings = get_settings()


def create_alert(message: str, param: str) -> dict[str, str]:
    app = settings.alert_app_name
    return {f"X-{app}-alert": message, f"X-{app}-params": param}


def entity_creation_alert(entity_name: str, param: str) -> dict[str, str]:
    return create_alert(f"{settings.alert_app_name}.{entity_name}.created", param)


def entity_update_alert(entity_name: str, param: str) -> dict[str, str]:
    return create_alert(f"{settings.alert_app_name}.{entity_name}.updated", param)


def entity_deletion_alert(entity_name: str, param: str) -> dict[str, str]:
    return create_alert(f"{settings.alert_app_name}.{entity_name}.deleted", param)


def failure_alert(entity_name: str, error_key: str, default_message: str) -> dict[str, str]:
    """Headers for a rejected request. error_key becomes ``error.<key>`` for client-side i18n."""
    logger.error("Entity processing failed, %s", default_message)
    app = settings.alert_app_name
    return {f"X-{app}-error": f"error.{error_key}", f"X-{app}-params": entity_name}
