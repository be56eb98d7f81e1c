"""Install loader bootstrap (Python-first, retry-aware).

Core design goals:
- Deterministic path layout under a single install root
- Config resolution that can never abort an installer run
- Retry detection through the server-info file
- Centralized logging under the install root
"""

__all__ = []
