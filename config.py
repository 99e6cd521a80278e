# config.py

# --- Example selection ---
# Run order when no example is named on the command line.
EXAMPLE_ORDER = ["srp", "ocp", "lsp", "isp", "dip"]

# --- Console output ---
BANNER_WIDTH = 50
BANNER_CHAR = "="

# --- Open/Closed: notifications ---
DEFAULT_NOTIFICATION = "Your order has been shipped"

# --- Open/Closed: payments ---
# Demo charges per payment method label
DEMO_PAYMENTS = [
    ("credit", 1000),
    ("paypal", 2000),
    ("upi", 500),
]

# --- Single Responsibility: order placement ---
DEMO_ORDER_ID = 1
DEMO_ORDER_AMOUNT = 5000

# --- Dependency Inversion: reports ---
REPORT_CONTENT = "Annual Financial Report"
