"""DTOs for insight cards."""

from __future__ import annotations

from pydantic import BaseModel, Field

from src.domain.entities.insight import Insight, InsightCategory, InsightPriority


class InsightDTO(BaseModel):
    """Serializable insight card."""

    id: str = Field(description="Stable identifier of the rule that fired")
    priority: InsightPriority
    category: InsightCategory
    title: str
    description: str = Field(description="Rendered, human-readable message")
    link: str = Field(description="Suggested navigation target in the dashboard")

    @classmethod
    def from_domain(cls, insight: Insight) -> "InsightDTO":
        return cls(
            id=insight.id,
            priority=insight.priority,
            category=insight.category,
            title=insight.title,
            description=insight.description,
            link=insight.link,
        )

    model_config = {
        "json_schema_extra": {
            "example": {
                "id": "low-stock",
                "priority": "high",
                "category": "inventory",
                "title": "Low Stock Alert",
                "description": (
                    "3 product(s) need restocking soon to avoid lost sales."
                ),
                "link": "/estoque",
            }
        }
    }
