# -*- coding: utf-8 -*-
"""
Part Type (Domain) Models

Every catalogue part type is described by one PartDomain row. Code that
turns raw records into options reads field names from this table only.
"""
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field


class PartType(str, Enum):
    """Catalogue part types"""
    CABIN = "cabin"
    ENGINE = "engine"
    AXLE = "axle"
    TRANSMISSION = "transmission"
    STEERING = "steering"


class PartDomain(BaseModel):
    """Field mapping of one part type"""
    tag: PartType
    display_name: str = Field(..., description="Human readable part type name")
    endpoint: str = Field(..., description="Path segment under /catalogs")
    id_field: str = Field(..., description="Parent record identifier")
    name_en_field: str
    name_cn_field: str
    children_field: str = Field(..., description="Nested sub-type collection")
    child_id_field: str
    child_name_en_field: str
    child_name_cn_field: str

    class Config:
        frozen = True


PART_DOMAINS: Dict[PartType, PartDomain] = {
    PartType.CABIN: PartDomain(
        tag=PartType.CABIN,
        display_name="Cabin",
        endpoint="cabines",
        id_field="cabines_id",
        name_en_field="cabines_name_en",
        name_cn_field="cabines_name_cn",
        children_field="type_cabines",
        child_id_field="type_cabine_id",
        child_name_en_field="type_cabine_name_en",
        child_name_cn_field="type_cabine_name_cn",
    ),
    PartType.ENGINE: PartDomain(
        tag=PartType.ENGINE,
        display_name="Engine",
        endpoint="engines",
        id_field="engines_id",
        name_en_field="engines_name_en",
        name_cn_field="engines_name_cn",
        children_field="type_engines",
        child_id_field="type_engine_id",
        child_name_en_field="type_engine_name_en",
        child_name_cn_field="type_engine_name_cn",
    ),
    PartType.AXLE: PartDomain(
        tag=PartType.AXLE,
        display_name="Axle",
        endpoint="axel",
        id_field="axel_id",
        name_en_field="axel_name_en",
        name_cn_field="axel_name_cn",
        children_field="type_axels",
        child_id_field="type_axel_id",
        child_name_en_field="type_axel_name_en",
        child_name_cn_field="type_axel_name_cn",
    ),
    PartType.TRANSMISSION: PartDomain(
        tag=PartType.TRANSMISSION,
        display_name="Transmission",
        endpoint="transmission",
        id_field="transmission_id",
        name_en_field="transmission_name_en",
        name_cn_field="transmission_name_cn",
        children_field="type_transmissions",
        child_id_field="type_transmission_id",
        child_name_en_field="type_transmission_name_en",
        child_name_cn_field="type_transmission_name_cn",
    ),
    PartType.STEERING: PartDomain(
        tag=PartType.STEERING,
        display_name="Steering",
        endpoint="steering",
        id_field="steering_id",
        name_en_field="steering_name_en",
        name_cn_field="steering_name_cn",
        children_field="type_steerings",
        child_id_field="type_steering_id",
        child_name_en_field="type_steering_name_en",
        child_name_cn_field="type_steering_name_cn",
    ),
}


def get_part_domain(tag: str) -> Optional[PartDomain]:
    """Look up a domain row by tag, None for unknown tags"""
    try:
        return PART_DOMAINS[PartType(tag)]
    except ValueError:
        return None


def part_type_choices(placeholder: str = "Select Part Type") -> List[Tuple[str, str]]:
    """(value, label) pairs for the part type selector"""
    choices = [("", placeholder)] if placeholder else []
    choices.extend((domain.tag.value, domain.display_name) for domain in PART_DOMAINS.values())
    return choices


class PartRecordPage(BaseModel):
    """One page of raw parent records as returned by the catalogue API"""
    items: List[Dict[str, Any]] = Field(default_factory=list)
    has_next_page: bool = False
    total_items: int = 0
