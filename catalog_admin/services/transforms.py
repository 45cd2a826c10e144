# -*- coding: utf-8 -*-
"""
Raw catalogue records -> Option lists

All functions are driven by a PartDomain row, there is no per-part-type
branching here.
"""
from typing import Any, Dict, Iterable, List, Optional

from catalog_admin.models import Option, PartDomain

LABEL_SEPARATOR = " - "


def bilingual_label(name_en: Any, name_cn: Any, fallback: Any = "") -> str:
    """Join English and Chinese names, skipping empty ones"""
    parts = [str(name) for name in (name_en, name_cn) if name]
    return LABEL_SEPARATOR.join(parts) or str(fallback)


def to_part_options(domain: PartDomain, records: Iterable[Dict[str, Any]]) -> List[Option]:
    """Transform parent records of a part type into options"""
    options = []
    for record in records or []:
        value = record.get(domain.id_field)
        if value is None:
            continue
        options.append(Option(
            value=value,
            label=bilingual_label(record.get(domain.name_en_field), record.get(domain.name_cn_field), value),
        ))
    return options


def find_parent(
    domain: PartDomain, records: Iterable[Dict[str, Any]], parent_id: Any
) -> Optional[Dict[str, Any]]:
    """Linear scan for the parent record with the given id"""
    for record in records or []:
        if str(record.get(domain.id_field)) == str(parent_id):
            return record
    return None


def leaf_records(domain: PartDomain, parent: Dict[str, Any]) -> List[Dict[str, Any]]:
    """Nested sub-type collection of a parent record"""
    return list(parent.get(domain.children_field) or [])


def leaf_names(domain: PartDomain, leaf: Dict[str, Any]) -> tuple:
    return (
        str(leaf.get(domain.child_name_en_field) or ""),
        str(leaf.get(domain.child_name_cn_field) or ""),
    )


def leaf_matches(domain: PartDomain, leaf: Dict[str, Any], search_term: str) -> bool:
    """Case-insensitive substring match over both names"""
    term = search_term.lower()
    return any(term in name.lower() for name in leaf_names(domain, leaf))


def to_subtype_options(domain: PartDomain, leaves: Iterable[Dict[str, Any]]) -> List[Option]:
    """Transform sub-type records into options"""
    options = []
    for leaf in leaves or []:
        value = leaf.get(domain.child_id_field)
        if value is None:
            continue
        name_en, name_cn = leaf_names(domain, leaf)
        options.append(Option(value=value, label=bilingual_label(name_en, name_cn, value)))
    return options
