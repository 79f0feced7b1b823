"""
SEC EDGAR markup parsing: company search feeds, filing indexes and filing documents.
"""

import re
import xml.etree.ElementTree as ET
from typing import List, Optional, Union
from urllib.parse import parse_qs, urlparse

from bs4 import BeautifulSoup

from .core.models import CompanyMatch, FilingDocument
from .utils.exceptions import ParseError


def _local_name(tag) -> str:
    # ElementTree spells namespaced tags as "{uri}name"; comments have a callable tag
    return tag.rsplit("}", 1)[-1] if isinstance(tag, str) else ""


def _find(element: ET.Element, name: str) -> Optional[ET.Element]:
    for child in element.iter():
        if child is not element and _local_name(child.tag) == name:
            return child
    return None


def _find_text(element: ET.Element, name: str) -> str:
    found = _find(element, name)
    if found is None:
        return ""
    return "".join(found.itertext()).strip()


class SECDocumentParser:
    """Tree-based parser for the markup EDGAR returns."""

    state_location_pattern = re.compile(r"State location:\s*(\w+)", re.IGNORECASE)

    def clean_html_content(self, html_content: str) -> str:
        """Strip markup from a filing document and collapse whitespace."""
        soup = BeautifulSoup(html_content, "html.parser")

        # Remove non-content elements, including the hidden inline XBRL header
        for element in soup(["script", "style", "meta", "link", "ix:header"]):
            element.decompose()

        text = soup.get_text(" ")
        return re.sub(r"\s+", " ", text).strip()

    def parse_company_feed(self, feed: Union[str, bytes]) -> List[CompanyMatch]:
        """
        Parse the Atom feed returned by browse-edgar?action=getcompany.

        Parameters:
            feed (Union[str, bytes]): Raw Atom XML.

        Returns:
            List[CompanyMatch]: One entry per company that carries a CIK.
        """
        try:
            root = ET.fromstring(feed)
        except ET.ParseError as e:
            raise ParseError(f"Malformed company search feed: {str(e)}") from e

        companies = []
        for entry in root.iter():
            if _local_name(entry.tag) != "entry":
                continue
            cik = self._entry_cik(entry)
            if not cik:
                continue
            companies.append(
                CompanyMatch(
                    name=_find_text(entry, "title"),
                    cik=cik,
                    location=self._entry_location(entry),
                )
            )

        # A lookup by CIK answers with that company's own feed instead of a result list
        if not companies:
            company_info = _find(root, "company-info")
            if company_info is not None and _find_text(company_info, "cik"):
                companies.append(
                    CompanyMatch(
                        name=_find_text(company_info, "conformed-name"),
                        cik=_find_text(company_info, "cik"),
                        location=_find_text(company_info, "state-location"),
                    )
                )

        return companies

    def _entry_cik(self, entry: ET.Element) -> str:
        for element in entry.iter():
            if _local_name(element.tag) != "link":
                continue
            query = parse_qs(urlparse(element.get("href", "")).query)
            for key, values in query.items():
                if key.upper() == "CIK" and values and values[0].strip():
                    return values[0].strip()
        return _find_text(entry, "cik")

    def _entry_location(self, entry: ET.Element) -> str:
        content = _find(entry, "content")
        if content is not None:
            match = self.state_location_pattern.search(" ".join(content.itertext()))
            if match:
                return match.group(1)
        return _find_text(entry, "state")

    def parse_filing_index(self, html_content: str) -> List[FilingDocument]:
        """
        Extract the document table from a filing's -index.htm page.

        Rows need at least four cells (Seq, Description, Document, Type) and a
        document name; the description falls back to the type column.
        """
        soup = BeautifulSoup(html_content, "html.parser")

        documents = []
        for row in soup.find_all("tr"):
            cells = row.find_all("td", recursive=False)
            if len(cells) < 4:
                continue

            link = cells[2].find("a")
            name = (link or cells[2]).get_text(" ", strip=True)
            if not name:
                continue

            description = cells[1].get_text(" ", strip=True) or cells[3].get_text(" ", strip=True)
            documents.append(FilingDocument(name=name, description=description))

        return documents
