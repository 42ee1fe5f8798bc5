"""
Tests for service tag resolution
"""

from decimal import Decimal

import pytest

from service_center.exceptions import InvalidInput, InvalidServiceType
from service_center.models import ServiceKind
from service_center.services_catalog import (
    available_service_types,
    build_service,
    parse_service_kind,
)


class TestParseServiceKind:
    """Tests for parse_service_kind"""

    def test_known_tags(self):
        """Test recognized tags map to their kinds"""
        assert parse_service_kind("oil") is ServiceKind.OIL_CHANGE
        assert parse_service_kind("engine") is ServiceKind.ENGINE_REPAIR

    def test_surrounding_whitespace_ignored(self):
        """Test whitespace around a tag is stripped"""
        assert parse_service_kind("  oil ") is ServiceKind.OIL_CHANGE
        assert parse_service_kind("engine\n") is ServiceKind.ENGINE_REPAIR

    @pytest.mark.parametrize("tag", ["OIL", "Oil", " Engine ", "ENGINE"])
    def test_tag_case_must_match(self, tag):
        """Test tags differing only in case are rejected"""
        with pytest.raises(InvalidServiceType):
            parse_service_kind(tag)

    @pytest.mark.parametrize("tag", ["brakes", "", "oil change", None])
    def test_unknown_tag_raises(self, tag):
        """Test unknown tags raise InvalidServiceType"""
        with pytest.raises(InvalidServiceType) as exc_info:
            parse_service_kind(tag)
        assert exc_info.value.tag == tag

    def test_invalid_service_type_is_input_error(self):
        """Test InvalidServiceType is reported as an input error"""
        with pytest.raises(InvalidInput, match="Invalid service type"):
            parse_service_kind("tyres")


class TestBuildService:
    """Tests for build_service"""

    def test_build_oil_change(self):
        """Test oil tag builds an oil change, ignoring repair type"""
        service = build_service("oil", "ignored")
        assert service.kind is ServiceKind.OIL_CHANGE
        assert service.cost() == Decimal("50.0")
        assert service.repair_detail is None

    def test_build_engine_repair(self):
        """Test engine tag builds an engine repair with the given type"""
        service = build_service("engine", "Timing belt")
        assert service.kind is ServiceKind.ENGINE_REPAIR
        assert service.repair_detail == "Timing belt"
        assert service.cost() == Decimal("300.0")

    def test_build_unknown_raises(self):
        """Test unknown tags never produce a service"""
        with pytest.raises(InvalidServiceType):
            build_service("paint")


def test_available_service_types():
    """Test catalog lists both recognized tags with labels"""
    assert available_service_types() == {"oil": "Oil Change", "engine": "Engine Repair"}
