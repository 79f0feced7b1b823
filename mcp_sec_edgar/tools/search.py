from typing import Optional
from urllib.parse import urlencode

from ..core.client import EdgarClient
from ..document_parser import SECDocumentParser
from .types import ToolResponse

FULL_TEXT_SEARCH_URL = "https://efts.sec.gov/LATEST/search-index"
BROWSE_EDGAR_URL = "https://www.sec.gov/cgi-bin/browse-edgar"


class SearchTools:
    """Full-text filing search and company lookup."""

    def __init__(self, client: EdgarClient, parser: Optional[SECDocumentParser] = None):
        self.client = client
        self.parser = parser or SECDocumentParser()

    async def search_filings(
        self,
        query: str,
        forms: Optional[str] = None,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
        from_: Optional[int] = None,
        size: Optional[int] = None,
    ) -> ToolResponse:
        """Run an EDGAR full-text search and return the upstream JSON as is."""
        params = {"q": query}
        if forms:
            params["forms"] = forms
        if start_date or end_date:
            params["dateRange"] = "custom"
            if start_date:
                params["startdt"] = start_date
            if end_date:
                params["enddt"] = end_date
        if from_ is not None:
            params["from"] = str(from_)
        if size is not None:
            params["size"] = str(size)

        return await self.client.get_json(f"{FULL_TEXT_SEARCH_URL}?{urlencode(params)}")

    async def search_companies(
        self,
        company: Optional[str] = None,
        cik: Optional[str] = None,
        form_type: Optional[str] = None,
        count: Optional[int] = None,
    ) -> ToolResponse:
        """Search companies by name or CIK through the browse-edgar Atom feed."""
        params = {"action": "getcompany", "output": "atom"}
        if company:
            params["company"] = company
        if cik:
            params["CIK"] = cik
        if form_type:
            params["type"] = form_type
        params["owner"] = "include"
        params["count"] = str(count if count is not None else 40)

        response = await self.client.dispatch(
            f"{BROWSE_EDGAR_URL}?{urlencode(params)}", {"Accept": "application/atom+xml"}
        )
        companies = self.parser.parse_company_feed(response.content)

        return {"total": len(companies), "companies": [c.to_dict() for c in companies]}
