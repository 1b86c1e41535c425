import sentry_sdk
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.pymongo import PyMongoIntegration
from sentry_sdk.integrations.logging import LoggingIntegration

# Health checks and API docs, not worth a trace
UNTRACED_TRANSACTIONS = {"/health", "/scalar", "/docs", "/redoc", "/openapi.json"}
SENSITIVE_HEADERS = ("authorization", "cookie", "set-cookie")

def init_sentry(
    dsn: str,
    environment: str = "development",
    release: str | None = None,
    traces_sample_rate: float = 0.2,
    send_default_pii: bool = False,
):
    sentry_sdk.init(
        dsn=dsn,
        environment=environment,
        release=release,
        send_default_pii=send_default_pii,
        integrations=[
            FastApiIntegration(transaction_style="url"),
            PyMongoIntegration(),
            LoggingIntegration(level=None, event_level="ERROR"),
        ],
        traces_sample_rate=traces_sample_rate,
        max_breadcrumbs=200,
        before_send=_strip_sensitive,
        before_send_transaction=_drop_untraced_transactions
    )

def _strip_sensitive(event, hint):
    headers = event.get("request", {}).get("headers", {}) or {}
    for k in list(headers.keys()):
        if k.lower() in SENSITIVE_HEADERS:
            headers[k] = "[Filtered]"
    return event

def _drop_untraced_transactions(event, hint):
    # transaction_style="url" names transactions by route template, e.g. /v1/folder/{folder_id}
    if event.get("transaction") in UNTRACED_TRANSACTIONS:
        return None
    return event
