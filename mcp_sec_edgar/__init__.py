from mcp_sec_edgar.core import EdgarClient, RateLimiter, CompanyMatch, FilingDocument, FilingInfo, InsiderFilingInfo
from mcp_sec_edgar.tools import CompanyTools, FilingsTools, FinancialTools, InsiderTools, SearchTools
from mcp_sec_edgar.utils import SECEdgarMCPError, TransportError, UpstreamStatusError, ParseError, normalize_cik

__version__ = "1.0.0"

__all__ = [
    # Core
    "EdgarClient",
    "RateLimiter",
    "CompanyMatch",
    "FilingDocument",
    "FilingInfo",
    "InsiderFilingInfo",

    # Tools
    "CompanyTools",
    "FilingsTools",
    "FinancialTools",
    "InsiderTools",
    "SearchTools",

    # Utils
    "SECEdgarMCPError",
    "TransportError",
    "UpstreamStatusError",
    "ParseError",
    "normalize_cik",
]
