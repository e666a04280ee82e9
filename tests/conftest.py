import pytest
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'backend'))

from portfolio_api.holdings import HoldingsStore
from portfolio_api.kpis import MetricsEngine

# ── Minimal test portfolio (3 positions, clean round numbers for easy mental math) ──
TEST_HOLDINGS = [
    {"symbol": "AAA", "name": "Alpha Systems",  "quantity": 10, "avg_price": 100.00, "current_price": 110.00,
     "sector": "Technology", "market_cap": "Large"},
    {"symbol": "BBB", "name": "Beta Bank",      "quantity": 20, "avg_price": 50.00,  "current_price": 45.00,
     "sector": "Banking",    "market_cap": "Large"},
    {"symbol": "CCC", "name": "Gamma Software", "quantity": 5,  "avg_price": 200.00, "current_price": 240.00,
     "sector": "Technology", "market_cap": "Mid"},
]
# Values:    AAA 1100 (+100, +10%), BBB 900 (-100, -10%), CCC 1200 (+200, +20%)
# Total value:    1100 + 900 + 1200 = 3200
# Total invested: 1000 + 1000 + 1000 = 3000
# Gain:           200 → 200 / 3000 = 6.67%
# By sector:      Technology 2300 (71.875 → 71.9%), Banking 900 (28.125 → 28.1%)
# By market cap:  Large 2000 (62.5%), Mid 1200 (37.5%)
# Top performer CCC (+20%), worst BBB (-10%)

# ── The same first holding, alone (single-category boundary) ──
SINGLE_HOLDING = TEST_HOLDINGS[:1]


@pytest.fixture
def store():
    """HoldingsStore over TEST_HOLDINGS."""
    return HoldingsStore.from_records(TEST_HOLDINGS)


@pytest.fixture
def engine(store):
    return MetricsEngine(store)


@pytest.fixture
def empty_store():
    return HoldingsStore([])


@pytest.fixture
def sample_store():
    """The bundled ten-holding sample portfolio from config."""
    from portfolio_api import config
    return HoldingsStore.from_records(config.HOLDINGS)
