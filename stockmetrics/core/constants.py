VALUATION_METHODS = ("FIFO", "LIFO")

DEFAULT_PERIOD = "this-month"
DASHBOARD_LOAD_ERROR = "Failed to load dashboard data."
