from ..core.client import EdgarClient
from ..core.models import FilingInfo
from ..utils.identifiers import normalize_cik
from .types import ToolResponse, column_value

SUBMISSIONS_URL = "https://data.sec.gov/submissions/CIK{cik}.json"

# Rows of recent filings returned to the caller
MAX_RECENT_FILINGS = 50


class CompanyTools:
    """Tools for company-related operations."""

    def __init__(self, client: EdgarClient):
        self.client = client

    async def get_company_filings(self, cik: str) -> ToolResponse:
        """Get company metadata and its most recent filings from the submissions API."""
        data = await self.client.get_json(SUBMISSIONS_URL.format(cik=normalize_cik(cik)))

        recent = (data.get("filings") or {}).get("recent") or {}
        filings = []
        for i, accession_number in enumerate(recent.get("accessionNumber") or []):
            filings.append(
                FilingInfo(
                    accession_number=accession_number,
                    form=column_value(recent, "form", i),
                    filing_date=column_value(recent, "filingDate", i),
                    primary_document=column_value(recent, "primaryDocument", i),
                    primary_doc_description=column_value(recent, "primaryDocDescription", i),
                )
            )

        return {
            "cik": data.get("cik"),
            "name": data.get("name"),
            "tickers": data.get("tickers"),
            "sic": data.get("sic"),
            "sicDescription": data.get("sicDescription"),
            "totalFilings": len(filings),
            "recentFilings": [f.to_dict() for f in filings[:MAX_RECENT_FILINGS]],
        }
