"""Shared constants for proxyctl."""

from pathlib import Path

# Rendered nginx artifacts, one file per proxy definition
NGINX_CONF_DIR = Path("/etc/nginx/proxyctl.d")

# State / logging (overridable via ProxyctlConfig / env vars)
STATE_DIR = Path("/var/lib/proxyctl")
STORE_DB_NAME = "proxies.db"
AUDIT_DB_NAME = "audit.db"
LOG_DIR = Path("/var/log/proxyctl")
AUDIT_JSONL_NAME = "audit.jsonl"

# Upstream location directives
REAL_IP_HEADER = "X-Real-IP"
REAL_IP_VALUE = "$remote_addr"
HOST_HEADER = "Host"
HOST_VALUE = "$http_host"
REDIRECT_SOURCE = "^/(.*)"
REDIRECT_TARGET = "https://$server_name$1"

# TLS policy defaults for new proxy definitions
DEFAULT_SSL_CIPHERS = "HIGH:!aNULL:!MD5"
DEFAULT_SSL_PROTOCOLS = "TLSv1.2 TLSv1.3"
DEFAULT_SSL_SESSION_CACHE = "shared:SSL:10m"
DEFAULT_SSL_SESSION_TIMEOUT = "10m"
DEFAULT_SSL_PREFER_SERVER_CIPHERS = True
DEFAULT_SSL_STAPLING = False
