import logging
from typing import List, Optional

from app.core.exceptions import NotFoundError
from app.crud import mutations, queries
from app.models.alternative import Alternative
from app.models.tool import Tool
from app.schemas.tool import ToolCreate
from app.services.resource_service import ResourceService

logger = logging.getLogger(__name__)


class ToolService(ResourceService):
    model = Tool
    resource_name = "Tool"

    def create(self, data: ToolCreate) -> Tool:
        """
        Insert a tool and, when ``alternative_id`` is given, its link to that
        alternative. Both writes commit together or not at all.
        """
        values = data.model_dump(exclude_unset=True)
        alternative_id = values.pop("alternative_id", None)

        if alternative_id and queries.find_by_id(self.db, Alternative, alternative_id) is None:
            raise NotFoundError("Alternative", f"id {alternative_id}")

        try:
            tool = mutations.insert(self.db, Tool, values, commit=False)
            if alternative_id:
                self.link_to_alternative(tool.id, alternative_id, commit=False)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        self.db.refresh(tool)
        logger.info("Created tool %s (%s)", tool.slug, tool.id)
        return tool

    def find_by_slug(self, slug: str) -> Optional[Tool]:
        return queries.find_by_slug(self.db, Tool, slug)

    def link_to_alternative(self, tool_id: str, alternative_id: str, commit: bool = True):
        return mutations.link_tool_to_alternative(self.db, tool_id, alternative_id, commit=commit)

    def sitemap(self) -> List[Tool]:
        return queries.find_sitemap_tools(self.db)
