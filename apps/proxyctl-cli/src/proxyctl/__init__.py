"""proxyctl — compile reverse-proxy definitions into nginx configuration."""

__version__ = "0.1.0"
