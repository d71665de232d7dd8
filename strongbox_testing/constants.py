# Pause between two HEAD probes of the same resource.
HTTP_PROBE_SLEEP_MILLIS = 1000

DEFAULT_TIMEOUT_MILLIS = 60_000
SHORT_TIMEOUT_MILLIS = 10_000
DEFAULT_SLEEP_MILLIS = 500

# Status codes a HEAD probe accepts as "available". Redirects are not followed.
HTTP_SUCCESS_STATUSES = range(200, 300)
