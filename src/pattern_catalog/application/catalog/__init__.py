"""Catalog use cases: listing, describing and running pattern demos."""

from .dto import DemoRunDTO, DemoSummaryDTO
from .service import CatalogService

__all__ = ['CatalogService', 'DemoRunDTO', 'DemoSummaryDTO']
