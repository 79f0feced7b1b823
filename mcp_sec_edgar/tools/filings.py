from typing import Optional

from ..core.client import EdgarClient
from ..document_parser import SECDocumentParser
from ..utils.identifiers import accession_dashed, accession_undashed, unpadded_cik
from .types import ToolResponse

ARCHIVES_URL = "https://www.sec.gov/Archives/edgar/data"

# Upper bound on returned document text
MAX_CONTENT_CHARS = 50000


class FilingsTools:
    """Tools for filing-related operations."""

    def __init__(self, client: EdgarClient, parser: Optional[SECDocumentParser] = None):
        self.client = client
        self.parser = parser or SECDocumentParser()

    async def get_filing_content(
        self, accession_number: str, cik: str, document: Optional[str] = None
    ) -> ToolResponse:
        """
        Get a filing document as plain text, or the filing's document list.

        Parameters:
            accession_number (str): Accession number, dashed or undashed.
            cik (str): CIK of the filer.
            document (Optional[str]): Document file name inside the filing. When
                omitted, the filing index is parsed instead.
        """
        folder = f"{ARCHIVES_URL}/{unpadded_cik(cik)}/{accession_undashed(accession_number)}"

        if document:
            url = f"{folder}/{document}"
            text = await self.client.get_text(url, {"Accept": "text/html, text/plain, */*"})
            content = self.parser.clean_html_content(text)
            return {"url": url, "content": content[:MAX_CONTENT_CHARS]}

        index_url = f"{folder}/{accession_dashed(accession_number)}-index.htm"
        text = await self.client.get_text(index_url, {"Accept": "text/html"})
        documents = self.parser.parse_filing_index(text)

        return {"indexUrl": index_url, "documents": [d.to_dict() for d in documents]}
