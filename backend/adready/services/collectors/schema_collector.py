"""
Schema Collector - Extract JSON-LD structured data from a parsed page.

Extracts:
- Schema.org JSON-LD blocks
- Schema types (Organization, Article, WebSite, etc.)
"""

import json
from typing import Optional
from dataclasses import dataclass, field

from adready.logger import logger
from adready.services.document import Document


@dataclass
class SchemaItem:
    """Single JSON-LD schema block."""
    type: str
    data: dict
    valid: bool = True
    error: Optional[str] = None


@dataclass
class SchemaData:
    """All structured data from page."""
    block_count: int = 0
    schemas: list[SchemaItem] = field(default_factory=list)

    @property
    def types(self) -> list[str]:
        """Get all schema types found."""
        return [s.type for s in self.schemas if s.valid]

    @property
    def has_any(self) -> bool:
        return self.block_count > 0


class SchemaCollector:
    """Collector for JSON-LD structured data."""

    def collect(self, document: Document) -> SchemaData:
        """Extract all JSON-LD schemas from the document."""
        schema_data = SchemaData()

        scripts = document.find_all("script", type="application/ld+json")
        schema_data.block_count = len(scripts)

        for script in scripts:
            if not script.string:
                continue

            try:
                data = json.loads(script.string)
            except json.JSONDecodeError as e:
                logger.warning(f"Invalid JSON-LD: {e}")
                schema_data.schemas.append(SchemaItem(
                    type="unknown",
                    data={},
                    valid=False,
                    error=f"Invalid JSON: {str(e)[:100]}"
                ))
                continue

            # Handle @graph arrays
            if isinstance(data, dict) and "@graph" in data:
                items = data["@graph"] if isinstance(data["@graph"], list) else [data["@graph"]]
            elif isinstance(data, list):
                items = data
            else:
                items = [data]

            for item in items:
                schema_data.schemas.append(self._parse_schema(item))

        logger.debug(f"Found {len(schema_data.schemas)} schemas: {schema_data.types}")
        return schema_data

    def _parse_schema(self, data) -> SchemaItem:
        """Parse a single schema object."""
        if not isinstance(data, dict):
            return SchemaItem(type="unknown", data={}, valid=False, error="Not a dict")

        schema_type = data.get("@type", "unknown")

        # Handle array of types
        if isinstance(schema_type, list):
            schema_type = schema_type[0] if schema_type else "unknown"

        return SchemaItem(type=str(schema_type), data=data, valid=True)
