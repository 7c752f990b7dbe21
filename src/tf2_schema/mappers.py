"""
Mapping from API results to the assembled item schema.
"""

from typing import Any

from .models import GetSchemaOverviewResult, SchemaComponents, SchemaItem, SchemaOptions, SchemaOverview
from .schema import ItemSchema


class SchemaOverviewMapper:
    """Projects a ``GetSchemaOverview`` result onto the reference tables."""

    @staticmethod
    def map(result: GetSchemaOverviewResult) -> SchemaOverview:
        return SchemaOverview(
            qualities=result.qualities,
            quality_names=result.quality_names,
            attributes=result.attributes,
            attribute_controlled_attached_particles=result.attribute_controlled_attached_particles,
            item_sets=result.item_sets,
            item_levels=result.item_levels,
            origin_names=result.origin_names,
            string_lookups=result.string_lookups,
            kill_eater_score_types=result.kill_eater_score_types,
        )


class ItemSchemaMapper:
    """Combines the fetched parts into one ``ItemSchema``."""

    @staticmethod
    def map(
        client: Any,
        items: list[SchemaItem],
        result: GetSchemaOverviewResult,
        options: SchemaOptions,
    ) -> ItemSchema:
        overview = SchemaOverviewMapper.map(result)
        components = SchemaComponents(items=items, client=client, overview=overview)
        return ItemSchema(components, options)
