# ruff: noqa: N812

from .catalogs import blp as BlueprintCatalogs
from .health import blp as BlueprintHealth
from .offboarding import blp as BlueprintOffboarding

__all__ = ['BlueprintCatalogs', 'BlueprintHealth', 'BlueprintOffboarding']
