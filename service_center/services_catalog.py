"""
Service catalog for the vehicle service center.
Resolves service-type tags entered by the operator into Service instances.
"""

import logging
from typing import Dict, Optional

from service_center.exceptions import InvalidServiceType
from service_center.models import SERVICE_LABELS, Service, ServiceKind

logger = logging.getLogger(__name__)


def oil_change() -> Service:
    """Standard oil change at a fixed price"""
    return Service(kind=ServiceKind.OIL_CHANGE)


def engine_repair(repair_type: str) -> Service:
    """Engine repair of the given type, billed with labor markup"""
    return Service(kind=ServiceKind.ENGINE_REPAIR, repair_detail=repair_type)


def parse_service_kind(tag: str) -> ServiceKind:
    """
    Map an operator-entered tag to a service kind

    Args:
        tag: Service tag, exactly "oil" or "engine" (surrounding
            whitespace is ignored, case is not)

    Returns:
        ServiceKind: Matching kind

    Raises:
        InvalidServiceType: If the tag is not recognized
    """
    normalized = (tag or "").strip()
    try:
        return ServiceKind(normalized)
    except ValueError:
        logger.warning(f"Rejected unknown service type tag: {tag!r}")
        raise InvalidServiceType(tag) from None


def build_service(tag: str, repair_type: Optional[str] = None) -> Service:
    """Resolve a tag (and repair type for engine work) into a Service"""
    kind = parse_service_kind(tag)
    if kind is ServiceKind.OIL_CHANGE:
        return oil_change()
    return engine_repair(repair_type or "")


def available_service_types() -> Dict[str, str]:
    """Get recognized tags mapped to their display labels"""
    return {kind.value: SERVICE_LABELS[kind] for kind in ServiceKind}
