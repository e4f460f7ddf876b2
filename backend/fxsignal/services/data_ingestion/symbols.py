"""
Symbol / Interval Translation

Maps the analyzer's pair and timeframe names to Twelve Data conventions.
"""

# Pair -> Twelve Data symbol
SYMBOL_MAP = {
    # Metals
    "XAUUSD": "XAU/USD",
    "XAGUSD": "XAG/USD",
    # Majors
    "EURUSD": "EUR/USD",
    "GBPUSD": "GBP/USD",
    "USDJPY": "USD/JPY",
    "USDCHF": "USD/CHF",
    "USDCAD": "USD/CAD",
    "AUDUSD": "AUD/USD",
    "NZDUSD": "NZD/USD",
    # Crosses
    "EURGBP": "EUR/GBP",
    "EURJPY": "EUR/JPY",
    "GBPJPY": "GBP/JPY",
}

# Timeframe -> Twelve Data interval (identity when absent)
INTERVAL_MAP = {
    "60min": "1h",
    "240min": "4h",
}


def map_symbol(pair: str) -> str:
    """Translate a pair to the provider symbol. Unknown pairs pass through."""
    return SYMBOL_MAP.get(pair, pair)


def map_interval(timeframe: str) -> str:
    """Translate a timeframe to the provider interval."""
    return INTERVAL_MAP.get(timeframe, timeframe)
