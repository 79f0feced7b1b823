from .exceptions import SECEdgarMCPError, TransportError, UpstreamStatusError, ParseError
from .identifiers import normalize_cik, unpadded_cik, accession_dashed, accession_undashed

__all__ = [
    "SECEdgarMCPError",
    "TransportError",
    "UpstreamStatusError",
    "ParseError",
    "normalize_cik",
    "unpadded_cik",
    "accession_dashed",
    "accession_undashed",
]
