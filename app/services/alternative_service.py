from typing import List

from app.crud import mutations, queries
from app.models.alternative import Alternative
from app.models.tool import Tool
from app.services.resource_service import ResourceService


class AlternativeService(ResourceService):
    model = Alternative
    resource_name = "Alternative"

    def list_tools(self, alternative_id: str) -> List[Tool]:
        return queries.find_tools_for_alternative(self.db, alternative_id)

    def link_tool(self, tool_id: str, alternative_id: str):
        return mutations.link_tool_to_alternative(self.db, tool_id, alternative_id)

    def unlink_tool(self, tool_id: str, alternative_id: str) -> bool:
        return mutations.unlink_tool_from_alternative(self.db, tool_id, alternative_id)
