"""
Company Directory

Popular US-listed companies with metadata for search/autocomplete.
"""

from typing import Optional

from stockdash.schemas.market import Company

POPULAR_COMPANIES = [
    # Technology
    {"symbol": "AAPL", "name": "Apple Inc.", "sector": "Technology"},
    {"symbol": "MSFT", "name": "Microsoft Corporation", "sector": "Technology"},
    {"symbol": "GOOGL", "name": "Alphabet Inc.", "sector": "Technology"},
    {"symbol": "META", "name": "Meta Platforms Inc.", "sector": "Technology"},
    {"symbol": "NVDA", "name": "NVIDIA Corporation", "sector": "Technology"},
    {"symbol": "ADBE", "name": "Adobe Inc.", "sector": "Technology"},
    {"symbol": "CRM", "name": "Salesforce Inc.", "sector": "Technology"},
    {"symbol": "ORCL", "name": "Oracle Corporation", "sector": "Technology"},
    {"symbol": "INTC", "name": "Intel Corporation", "sector": "Technology"},
    {"symbol": "AMD", "name": "Advanced Micro Devices Inc.", "sector": "Technology"},
    {"symbol": "CSCO", "name": "Cisco Systems Inc.", "sector": "Technology"},
    {"symbol": "IBM", "name": "International Business Machines Corporation", "sector": "Technology"},
    # Consumer Discretionary
    {"symbol": "AMZN", "name": "Amazon.com Inc.", "sector": "Consumer Discretionary"},
    {"symbol": "TSLA", "name": "Tesla Inc.", "sector": "Consumer Discretionary"},
    {"symbol": "BABA", "name": "Alibaba Group Holding Limited", "sector": "Consumer Discretionary"},
    {"symbol": "HD", "name": "Home Depot Inc.", "sector": "Consumer Discretionary"},
    {"symbol": "NKE", "name": "Nike Inc.", "sector": "Consumer Discretionary"},
    {"symbol": "MCD", "name": "McDonald's Corporation", "sector": "Consumer Discretionary"},
    {"symbol": "SBUX", "name": "Starbucks Corporation", "sector": "Consumer Discretionary"},
    # Communication Services
    {"symbol": "NFLX", "name": "Netflix Inc.", "sector": "Communication Services"},
    {"symbol": "DIS", "name": "Walt Disney Company", "sector": "Communication Services"},
    {"symbol": "VZ", "name": "Verizon Communications Inc.", "sector": "Communication Services"},
    {"symbol": "T", "name": "AT&T Inc.", "sector": "Communication Services"},
    # Financial Services
    {"symbol": "V", "name": "Visa Inc.", "sector": "Financial Services"},
    {"symbol": "JPM", "name": "JPMorgan Chase & Co.", "sector": "Financial Services"},
    {"symbol": "MA", "name": "Mastercard Incorporated", "sector": "Financial Services"},
    {"symbol": "BAC", "name": "Bank of America Corporation", "sector": "Financial Services"},
    {"symbol": "PYPL", "name": "PayPal Holdings Inc.", "sector": "Financial Services"},
    {"symbol": "GS", "name": "Goldman Sachs Group Inc.", "sector": "Financial Services"},
    # Healthcare
    {"symbol": "JNJ", "name": "Johnson & Johnson", "sector": "Healthcare"},
    {"symbol": "UNH", "name": "UnitedHealth Group Incorporated", "sector": "Healthcare"},
    {"symbol": "PFE", "name": "Pfizer Inc.", "sector": "Healthcare"},
    {"symbol": "ABBV", "name": "AbbVie Inc.", "sector": "Healthcare"},
    # Consumer Staples
    {"symbol": "WMT", "name": "Walmart Inc.", "sector": "Consumer Staples"},
    {"symbol": "PG", "name": "Procter & Gamble Company", "sector": "Consumer Staples"},
    {"symbol": "KO", "name": "Coca-Cola Company", "sector": "Consumer Staples"},
    {"symbol": "PEP", "name": "PepsiCo Inc.", "sector": "Consumer Staples"},
    {"symbol": "COST", "name": "Costco Wholesale Corporation", "sector": "Consumer Staples"},
    # Energy
    {"symbol": "XOM", "name": "Exxon Mobil Corporation", "sector": "Energy"},
    {"symbol": "CVX", "name": "Chevron Corporation", "sector": "Energy"},
]

POPULAR_SYMBOLS = ["AAPL", "MSFT", "GOOGL", "AMZN", "TSLA", "META", "NVDA", "NFLX"]


def _to_company(entry: dict) -> Company:
    return Company(**entry)


def search_companies(query: str, limit: int = 10) -> list[Company]:
    """
    Search companies by symbol or name.

    Ranking: exact symbol, symbol prefix, then name substring.
    """
    query = query.strip()
    if not query:
        return []

    upper = query.upper()
    lower = query.lower()
    results: list[dict] = []

    # Exact symbol match
    for entry in POPULAR_COMPANIES:
        if entry["symbol"] == upper:
            results.append(entry)

    # Symbol starts with query
    for entry in POPULAR_COMPANIES:
        if entry["symbol"].startswith(upper) and entry not in results:
            results.append(entry)

    # Name contains query
    for entry in POPULAR_COMPANIES:
        if lower in entry["name"].lower() and entry not in results:
            results.append(entry)

    return [_to_company(e) for e in results[:limit]]


def get_popular_companies(count: int = 8) -> list[Company]:
    """Get most popular companies for default display, in popularity order."""
    by_symbol = {e["symbol"]: e for e in POPULAR_COMPANIES}
    return [_to_company(by_symbol[s]) for s in POPULAR_SYMBOLS[:count]]


def get_companies_by_sector(sector: str) -> list[Company]:
    """Get companies by sector (case-insensitive)."""
    return [
        _to_company(e)
        for e in POPULAR_COMPANIES
        if e["sector"].lower() == sector.lower()
    ]


def get_company(symbol: str) -> Optional[Company]:
    """Look up a company by symbol."""
    symbol = symbol.upper()
    for entry in POPULAR_COMPANIES:
        if entry["symbol"] == symbol:
            return _to_company(entry)
    return None
