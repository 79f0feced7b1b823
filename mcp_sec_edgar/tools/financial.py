from typing import Optional

from ..core.client import EdgarClient
from ..utils.identifiers import normalize_cik
from .types import ToolResponse

COMPANY_FACTS_URL = "https://data.sec.gov/api/xbrl/companyfacts/CIK{cik}.json"


class FinancialTools:
    """Tools for XBRL company facts."""

    def __init__(self, client: EdgarClient):
        self.client = client

    async def get_company_facts(self, cik: str, fact: Optional[str] = None) -> ToolResponse:
        """
        Get XBRL company facts.

        Without ``fact`` the available fact names are listed per taxonomy. With
        ``fact`` the first taxonomy defining it supplies the data; a fact missing
        from every taxonomy is reported in an ``error`` field.
        """
        data = await self.client.get_json(COMPANY_FACTS_URL.format(cik=normalize_cik(cik)))
        taxonomies = data.get("facts") or {}

        if fact:
            for taxonomy, facts in taxonomies.items():
                if facts and fact in facts:
                    return {
                        "cik": data.get("cik"),
                        "entityName": data.get("entityName"),
                        "taxonomy": taxonomy,
                        "fact": fact,
                        "data": facts[fact],
                    }
            return {
                "cik": data.get("cik"),
                "entityName": data.get("entityName"),
                "error": f"Fact '{fact}' not found",
            }

        return {
            "cik": data.get("cik"),
            "entityName": data.get("entityName"),
            "availableFacts": {taxonomy: list(facts or {}) for taxonomy, facts in taxonomies.items()},
        }
