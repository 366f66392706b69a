from typing import Dict

from app.core.config import settings


def _alert(message: str, param: str) -> Dict[str, str]:
    return {
        f"X-{settings.APP_NAME}-alert": message,
        f"X-{settings.APP_NAME}-params": param,
    }


def entity_creation_alert(entity_name: str, entity_id) -> Dict[str, str]:
    return _alert(f"{settings.APP_NAME}.{entity_name}.created", str(entity_id))


def entity_update_alert(entity_name: str, entity_id) -> Dict[str, str]:
    return _alert(f"{settings.APP_NAME}.{entity_name}.updated", str(entity_id))


def entity_deletion_alert(entity_name: str, entity_id) -> Dict[str, str]:
    return _alert(f"{settings.APP_NAME}.{entity_name}.deleted", str(entity_id))


def failure_alert(entity_name: str, error_key: str) -> Dict[str, str]:
    return {
        f"X-{settings.APP_NAME}-error": f"error.{error_key}",
        f"X-{settings.APP_NAME}-params": entity_name,
    }
