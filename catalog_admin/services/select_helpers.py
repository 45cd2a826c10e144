# -*- coding: utf-8 -*-
"""
Helpers shared by searchable select widgets
"""
from typing import Any, Callable, Dict, List, Optional

from catalog_admin.models import Option


def filter_options(options: List[Option], search_query: Optional[str]) -> List[Option]:
    """Case-insensitive filter on label or value"""
    if not search_query or not search_query.strip():
        return list(options)

    query = search_query.strip().lower()
    return [
        option for option in options
        if query in option.label.lower() or query in str(option.value).lower()
    ]


def _is_blank(value: Any) -> bool:
    return value is None or value == ""


def get_selected_option(value: Any, options: List[Option]) -> Optional[Option]:
    """Find the option for a stored form value"""
    if _is_blank(value):
        return None
    for option in options:
        if str(option.value) == str(value):
            return option
    return None


def validate_option(value: Any, options: List[Option]) -> bool:
    """Check that a value is one of the available options"""
    return get_selected_option(value, options) is not None


def sort_options(options: List[Option], direction: str = "asc") -> List[Option]:
    """Sort options by label"""
    return sorted(options, key=lambda option: option.label.lower(), reverse=direction == "desc")


def group_options(options: List[Option], group_by: Callable[[Option], str]) -> Dict[str, List[Option]]:
    groups: Dict[str, List[Option]] = {}
    for option in options:
        groups.setdefault(group_by(option), []).append(option)
    return groups


def create_default_options(placeholder: str = "Select option", include_empty: bool = True) -> List[Option]:
    """Placeholder entry shown before anything is selected"""
    return [Option(value="", label=placeholder)] if include_empty else []


def with_placeholder(options: List[Option], placeholder: str = "Select Type") -> List[Option]:
    """Prepend a placeholder entry to an option list"""
    return create_default_options(placeholder) + list(options)
