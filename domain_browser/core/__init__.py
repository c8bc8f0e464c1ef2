"""
Core domain layer: column schema resolution, filter criteria, filtering,
grouping, measure colours and the catalog view builder
"""

from .catalog import Catalog
from .catalog_view import CatalogView, build_catalog_view, describe_family
from .criteria import FilterCriteria
from .schema import ColumnSchema, resolve_schema

__all__ = [
    "Catalog",
    "CatalogView",
    "ColumnSchema",
    "FilterCriteria",
    "build_catalog_view",
    "describe_family",
    "resolve_schema",
]
