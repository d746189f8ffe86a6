"""
Prometheus metrics for binary serving.

Counters live on the default registry; the hosting server exposes them.
"""

from prometheus_client import Counter

ASSETS_SERVED = Counter(
    "ipxedust_assets_served_total",
    "iPXE binaries handed out for transfer",
    ["asset", "outcome"],
)

PATCH_ERRORS = Counter(
    "ipxedust_patch_errors_total",
    "Patch requests rejected because the payload did not fit",
    ["asset"],
)
