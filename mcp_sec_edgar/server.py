import argparse
import logging
import sys
from typing import Annotated, Any, Awaitable, Dict, Optional

from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError
from pydantic import Field

try:
    from .config import initialize_config
    from .core.client import EdgarClient
    from .tools import CompanyTools, FilingsTools, FinancialTools, InsiderTools, SearchTools
except ImportError:
    from mcp_sec_edgar.config import initialize_config
    from mcp_sec_edgar.core.client import EdgarClient
    from mcp_sec_edgar.tools import CompanyTools, FilingsTools, FinancialTools, InsiderTools, SearchTools


logger = logging.getLogger(__name__)

config = initialize_config()

# Single client for the whole process: every tool shares its rate limiter
client = EdgarClient(config)

search_tools = SearchTools(client)
company_tools = CompanyTools(client)
filings_tools = FilingsTools(client)
financial_tools = FinancialTools(client)
insider_tools = InsiderTools(client)

# Initialize MCP
mcp = FastMCP("SEC EDGAR MCP")


async def _run_tool(name: str, call: Awaitable[Dict[str, Any]]) -> Dict[str, Any]:
    """Await a tool call, turning any failure into an MCP error result."""
    try:
        return await call
    except Exception as e:
        logger.warning("Tool %s failed: %s", name, e)
        raise ToolError(str(e)) from e


@mcp.tool("search_filings")
async def search_filings_tool(
    query: str,
    forms: Optional[str] = None,
    startDate: Optional[str] = None,
    endDate: Optional[str] = None,
    from_: Annotated[Optional[int], Field(validation_alias="from")] = None,
    size: Optional[int] = None,
) -> Dict[str, Any]:
    """
    Full-text search across SEC EDGAR filings. Search for keywords in filing documents.

    Parameters:
        query (str): Search query (e.g. "artificial intelligence", "revenue decline").
        forms (Optional[str]): Comma-separated form types to filter (e.g. "10-K,10-Q,8-K").
        startDate (Optional[str]): Start date filter (YYYY-MM-DD).
        endDate (Optional[str]): End date filter (YYYY-MM-DD).
        from (Optional[int]): Pagination offset.
        size (Optional[int]): Number of results (default 10, max 100).

    Returns:
        Dict: The raw EDGAR full-text search response.
    """
    return await _run_tool(
        "search_filings",
        search_tools.search_filings(query, forms, startDate, endDate, from_, size),
    )


@mcp.tool("search_companies")
async def search_companies_tool(
    company: Optional[str] = None,
    cik: Optional[str] = None,
    type: Optional[str] = None,
    count: Optional[int] = None,
) -> Dict[str, Any]:
    """
    Search for companies in SEC EDGAR by name or CIK number.

    Parameters:
        company (Optional[str]): Company name to search for.
        cik (Optional[str]): CIK number to look up.
        type (Optional[str]): Filing type filter (e.g. "10-K").
        count (Optional[int]): Max results (default 40).

    Returns:
        Dict: Total and a list of companies with name, CIK and state location.
    """
    return await _run_tool("search_companies", search_tools.search_companies(company, cik, type, count))


@mcp.tool("get_company_filings")
async def get_company_filings_tool(cik: str) -> Dict[str, Any]:
    """
    Get recent filings for a company by CIK number. Returns filing metadata including form type,
    date, and document references.

    Parameters:
        cik (str): Company CIK number (e.g. "320193" for Apple).

    Returns:
        Dict: Company details and up to 50 recent filings.
    """
    return await _run_tool("get_company_filings", company_tools.get_company_filings(cik))


@mcp.tool("get_filing_content")
async def get_filing_content_tool(
    accessionNumber: str,
    cik: str,
    document: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Get the content of a specific SEC filing document. Without a document name, lists the
    documents in the filing.

    Parameters:
        accessionNumber (str): Filing accession number (e.g. "0000320193-24-000001").
        cik (str): Company CIK number.
        document (Optional[str]): Document file name within the filing (e.g. "aapl-20240928.htm").

    Returns:
        Dict: Document URL and text (up to 50,000 characters), or the index URL and document list.
    """
    return await _run_tool(
        "get_filing_content", filings_tools.get_filing_content(accessionNumber, cik, document)
    )


@mcp.tool("get_company_facts")
async def get_company_facts_tool(cik: str, fact: Optional[str] = None) -> Dict[str, Any]:
    """
    Get XBRL financial data for a company. Without a fact name, lists the available facts.

    Parameters:
        cik (str): Company CIK number.
        fact (Optional[str]): Specific fact to retrieve (e.g. "Revenues", "NetIncomeLoss", "Assets").

    Returns:
        Dict: Available facts per taxonomy, or the data for the requested fact.
    """
    return await _run_tool("get_company_facts", financial_tools.get_company_facts(cik, fact))


@mcp.tool("get_insider_trades")
async def get_insider_trades_tool(cik: str, limit: Optional[int] = None) -> Dict[str, Any]:
    """
    Get recent insider trading filings (Forms 3, 4, 5) for a company.

    Parameters:
        cik (str): Company CIK number.
        limit (Optional[int]): Max results (default 20).

    Returns:
        Dict: Company name and the insider filings found.
    """
    return await _run_tool(
        "get_insider_trades",
        insider_tools.get_insider_trades(cik, limit if limit is not None else 20),
    )


def main() -> None:
    parser = argparse.ArgumentParser(description="SEC EDGAR MCP Server")
    parser.add_argument(
        "--transport",
        type=str,
        default="stdio",
        choices=["streamable-http", "sse", "stdio"],
        help="Transport protocol to use (default: stdio)",
    )
    args = parser.parse_args()

    # stdout carries the stdio transport, so logs go to stderr
    logging.basicConfig(
        level=config.log_level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Starting SEC EDGAR MCP server (transport=%s)", args.transport)

    mcp.run(transport=args.transport)


if __name__ == "__main__":
    main()
