"""Prometheus metrics shared by the app and its routers."""

from prometheus_client import Counter, Histogram

api_requests_total = Counter('api_requests_total', 'Total API requests', ['method', 'endpoint', 'status'])
api_request_duration = Histogram('api_request_duration_seconds', 'API request duration')
chat_intents_total = Counter('chat_intents_total', 'Chat messages answered, by matched intent', ['intent'])
chat_failures_total = Counter('chat_failures_total', 'Chat messages that failed to process')
