"""Pydantic models for query and URL results."""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class SearchQueries(BaseModel):
    """Three search queries of decreasing specificity for one product."""

    main: str = Field("", description="Title words minus marketing adjectives, up to six")
    core: str = Field("", description="Key feature plus product category")
    simple: str = Field("", description="Canonical product type or the first title word")

    def as_list(self) -> List[str]:
        """Return the queries as ``[main, core, simple]``."""

        return [self.main, self.core, self.simple]


class ProductSearchPlan(BaseModel):
    """Everything derived from one product page, ready to be searched."""

    title: Optional[str] = Field(None, description="Cleaned product title, None when not found")
    queries: SearchQueries = Field(default_factory=SearchQueries)
    urls: Dict[str, str] = Field(
        default_factory=dict, description="Marketplace key to search URL for the main query"
    )
