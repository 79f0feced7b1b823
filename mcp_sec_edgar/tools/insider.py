from ..core.client import EdgarClient
from ..core.models import InsiderFilingInfo
from ..utils.identifiers import normalize_cik
from .company import SUBMISSIONS_URL
from .types import ToolResponse, column_value

INSIDER_FORMS = {"3", "4", "5"}


class InsiderTools:
    """Tools for insider trading filings (Forms 3, 4, 5)."""

    def __init__(self, client: EdgarClient):
        self.client = client

    async def get_insider_trades(self, cik: str, limit: int = 20) -> ToolResponse:
        """List a company's recent Form 3/4/5 filings in submissions order, up to ``limit``."""
        data = await self.client.get_json(SUBMISSIONS_URL.format(cik=normalize_cik(cik)))

        recent = (data.get("filings") or {}).get("recent") or {}
        trades = []
        for i, form in enumerate(recent.get("form") or []):
            if len(trades) >= limit:
                break
            if form not in INSIDER_FORMS:
                continue
            trades.append(
                InsiderFilingInfo(
                    form=form,
                    filing_date=column_value(recent, "filingDate", i),
                    accession_number=column_value(recent, "accessionNumber", i),
                    primary_document=column_value(recent, "primaryDocument", i),
                    report_date=column_value(recent, "reportDate", i),
                )
            )

        return {
            "cik": data.get("cik"),
            "name": data.get("name"),
            "totalInsiderFilings": len(trades),
            "trades": [t.to_dict() for t in trades],
        }
