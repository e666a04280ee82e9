import os

HOLDINGS = [
    # Energy
    {"symbol": "RELIANCE",   "name": "Reliance Industries Ltd",   "quantity": 50,  "avg_price": 2450.00, "current_price": 2680.50, "sector": "Energy",     "market_cap": "Large"},
    # Technology
    {"symbol": "INFY",       "name": "Infosys Limited",           "quantity": 100, "avg_price": 1800.00, "current_price": 2010.75, "sector": "Technology", "market_cap": "Large"},
    {"symbol": "TCS",        "name": "Tata Consultancy Services", "quantity": 75,  "avg_price": 3200.00, "current_price": 3890.25, "sector": "Technology", "market_cap": "Large"},
    # Banking
    {"symbol": "HDFC",       "name": "HDFC Bank",                 "quantity": 60,  "avg_price": 1650.00, "current_price": 1615.80, "sector": "Banking",    "market_cap": "Large"},
    {"symbol": "ICICIBANK",  "name": "ICICI Bank Ltd",            "quantity": 80,  "avg_price": 1100.00, "current_price": 1245.30, "sector": "Banking",    "market_cap": "Large"},
    # Technology
    {"symbol": "HCLTECH",    "name": "HCL Technologies",          "quantity": 90,  "avg_price": 1350.00, "current_price": 1520.40, "sector": "Technology", "market_cap": "Large"},
    {"symbol": "WIPRO",      "name": "Wipro Limited",             "quantity": 120, "avg_price": 450.00,  "current_price": 485.75,  "sector": "Technology", "market_cap": "Large"},
    # Banking
    {"symbol": "SBIN",       "name": "State Bank of India",       "quantity": 200, "avg_price": 550.00,  "current_price": 612.35,  "sector": "Banking",    "market_cap": "Large"},
    # Telecom
    {"symbol": "BHARTIARTL", "name": "Bharti Airtel Ltd",         "quantity": 150, "avg_price": 900.00,  "current_price": 1058.60, "sector": "Telecom",    "market_cap": "Large"},
    # Healthcare
    {"symbol": "DRREDDY",    "name": "Dr Reddy's Laboratories",   "quantity": 40,  "avg_price": 5200.00, "current_price": 6150.25, "sector": "Healthcare", "market_cap": "Large"},
]

# Illustrative monthly series: portfolio value vs. benchmark index levels.
PERFORMANCE_TIMELINE = [
    {"date": "2024-01-01", "portfolio": 650000, "nifty50": 21000, "gold": 62000},
    {"date": "2024-02-01", "portfolio": 672000, "nifty50": 21450, "gold": 63200},
    {"date": "2024-03-01", "portfolio": 680000, "nifty50": 22100, "gold": 64500},
    {"date": "2024-04-01", "portfolio": 695000, "nifty50": 22800, "gold": 66200},
    {"date": "2024-05-01", "portfolio": 715000, "nifty50": 23200, "gold": 67800},
    {"date": "2024-06-01", "portfolio": 700000, "nifty50": 23500, "gold": 68000},
]

# Trailing returns in percent
BENCHMARK_RETURNS = {
    "portfolio": {"1month": 2.3,  "3months": 8.1, "1year": 15.7},
    "nifty50":   {"1month": 1.8,  "3months": 6.2, "1year": 12.4},
    "gold":      {"1month": -0.5, "3months": 4.1, "1year": 8.9},
}

DIVERSIFICATION_SCORE = 8.2      # Static, not derived from holdings
RISK_LEVEL = "Moderate"

APP_NAME = "Portfolio API"
APP_VERSION = "0.1.0"
HOST = "0.0.0.0"
PORT = int(os.environ.get("PORT", "3001"))
LOG_LEVEL = "INFO"
CORS_ORIGINS = ["*"]
