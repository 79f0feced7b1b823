from typing import Optional


class SECEdgarMCPError(Exception):
    """Base exception for SEC EDGAR MCP."""
    pass


class TransportError(SECEdgarMCPError):
    """Raised when EDGAR cannot be reached at all."""
    pass


class UpstreamStatusError(SECEdgarMCPError):
    """Raised when the SEC API answers with a non-2xx status."""

    def __init__(self, status: int, status_text: Optional[str] = None, body_excerpt: str = ""):
        self.status = status
        self.status_text = status_text or ""
        self.body_excerpt = body_excerpt
        super().__init__(f"EDGAR API error {status}: {self.status_text}\n{body_excerpt}")


class ParseError(SECEdgarMCPError):
    """Raised when parsing fails."""
    pass
