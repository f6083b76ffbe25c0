"""Building blocks shared by the engines that follow standard SQL."""

from .information_schema import StandardInformationSchema
from .query_builder import StandardQueryBuilder
from .schema_builder import StandardSchemaBuilder

__all__ = [
    "StandardInformationSchema",
    "StandardQueryBuilder",
    "StandardSchemaBuilder",
]
