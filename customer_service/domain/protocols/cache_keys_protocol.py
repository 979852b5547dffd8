"""Cache keys protocol for key and tag generation.

Defines the port for cache key construction. The infrastructure adapter
(customer_service.infrastructure.cache.cache_keys.CacheKeyBuilder) provides
the concrete implementation used by the repository decorator and by the
invalidation subscribers, so both sides agree on key and tag names.
"""

from typing import Protocol


class CacheKeysProtocol(Protocol):
    """Protocol for generating customer cache keys and tags.

    Patterns:
        customer.{id}               key and tag for id lookups
        customer.email.{hash}       key and tag for email lookups
    """

    def build_customer_key(self, customer_id: str) -> str:
        """Cache key for an id lookup."""
        ...

    def build_customer_email_key(self, email: str) -> str:
        """Cache key for an email lookup."""
        ...

    def hash_email(self, email: str) -> str:
        """Stable one-way hash of the normalized email."""
        ...

    def build_customer_tag(self, customer_id: str) -> str:
        """Tag carried by every cached form of one customer."""
        ...

    def build_customer_email_tag(self, email: str) -> str:
        """Tag carried by the email-keyed entry of one email."""
        ...
