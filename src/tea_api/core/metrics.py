from prometheus_client import Counter, Gauge

REQUEST_COUNT = Counter(
    "http_requests_total",
    "Total number of HTTP requests",
    ["method", "path", "status_code"],
)

TEA_OPERATIONS = Counter(
    "tea_operations_total",
    "Total number of tea store operations",
    ["operation", "outcome"],
)

TEAS_STORED = Gauge("teas_stored", "Number of teas currently held in the store")
