from dataclasses import dataclass
from typing import Optional, Dict, Any


@dataclass
class FilingInfo:
    """Filing metadata row from the submissions API."""

    accession_number: str
    form: Optional[str] = None
    filing_date: Optional[str] = None
    primary_document: Optional[str] = None
    primary_doc_description: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "accessionNumber": self.accession_number,
            "form": self.form,
            "filingDate": self.filing_date,
            "primaryDocument": self.primary_document,
            "primaryDocDescription": self.primary_doc_description,
        }


@dataclass
class InsiderFilingInfo:
    """Form 3, 4 or 5 filing reference."""

    form: str
    filing_date: Optional[str] = None
    accession_number: Optional[str] = None
    primary_document: Optional[str] = None
    report_date: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "form": self.form,
            "filingDate": self.filing_date,
            "accessionNumber": self.accession_number,
            "primaryDocument": self.primary_document,
            "reportDate": self.report_date,
        }


@dataclass
class CompanyMatch:
    """Company returned by the EDGAR company search."""

    name: str
    cik: str
    location: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "cik": self.cik, "location": self.location}


@dataclass
class FilingDocument:
    """Document listed in a filing index."""

    name: str
    description: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "description": self.description}
