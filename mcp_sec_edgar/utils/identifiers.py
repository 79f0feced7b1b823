"""Helpers for the identifiers EDGAR uses in its URL paths."""


def normalize_cik(cik: str) -> str:
    """
    Normalize a CIK to the canonical 10-digit, zero-padded form.

    Parameters:
        cik (str): CIK with or without leading zeros (e.g. "320193", "0000320193").

    Returns:
        str: The zero-padded CIK (e.g. "0000320193").
    """
    value = str(cik).strip()
    if not (value.isascii() and value.isdigit()):
        raise ValueError(f"Invalid CIK '{cik}': expected digits only.")
    return value.lstrip("0").zfill(10)


def unpadded_cik(cik: str) -> str:
    """CIK without leading zeros, as used under /Archives/edgar/data/."""
    return normalize_cik(cik).lstrip("0") or "0"


def accession_undashed(accession_number: str) -> str:
    return accession_number.strip().replace("-", "")


def accession_dashed(accession_number: str) -> str:
    """
    Return the dashed accession form (0000320193-24-000001).

    An undashed 18-digit accession number is split 10-2-6; anything else is
    returned as given.
    """
    value = accession_number.strip()
    if "-" not in value and len(value) == 18 and value.isdigit():
        return f"{value[:10]}-{value[10:12]}-{value[12:]}"
    return value
