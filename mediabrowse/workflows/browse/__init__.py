"""
Browse workflows package.
"""

from .browse_modes_wf import browse_leaf, browse_metadata, browse_root
from .compose_root_menu_wf import MENU_ORDER, compose_root_menu
from .parse_search_criteria_wf import parse_search_criteria
from .search_bridge_wf import to_browse_result
from .wmp_prefilter_wf import is_wmp_filter, wmp_prefilter

__all__ = [
    "MENU_ORDER",
    "browse_leaf",
    "browse_metadata",
    "browse_root",
    "compose_root_menu",
    "is_wmp_filter",
    "parse_search_criteria",
    "to_browse_result",
    "wmp_prefilter",
]
