"""Cache key construction utilities.

Centralized key and tag construction so the cached repository (which tags
entries) and the invalidation subscribers (which invalidate tags) always
agree on names.

Patterns:
    customer.{id}                  id lookup key, per-customer tag
    customer.email.{sha256}        email lookup key, per-email tag
    customer                       every customer entry
    customer.email                 every email-keyed entry
    customer.collection            collection/list entries

Usage:
    keys = CacheKeyBuilder()
    keys.build_customer_key("01ARZ3NDEKTSV4RRFFQ69G5FAV")
    # "customer.01ARZ3NDEKTSV4RRFFQ69G5FAV"
"""

import hashlib

CUSTOMER_TAG = "customer"
CUSTOMER_EMAIL_TAG = "customer.email"
CUSTOMER_COLLECTION_TAG = "customer.collection"


class CacheKeyBuilder:
    """Deterministic mapping from customer identifiers to cache keys and tags.

    Pure functions, no side effects. Email addresses never appear in keys or
    tags in clear text: they are replaced by a SHA-256 hex digest of the
    normalized (trimmed, lower-cased) address.
    """

    def build_customer_key(self, customer_id: str) -> str:
        """Id lookup cache key.

        Pattern: customer.{id}

        Args:
            customer_id: Customer ULID.

        Returns:
            Cache key string.

        Raises:
            ValueError: If customer_id is empty.
        """
        return f"{CUSTOMER_TAG}.{self._require(str(customer_id), 'customer_id')}"

    def build_customer_email_key(self, email: str) -> str:
        """Email lookup cache key.

        Pattern: customer.email.{sha256(email)}

        Args:
            email: Customer email address.

        Returns:
            Cache key string.
        """
        return f"{CUSTOMER_EMAIL_TAG}.{self.hash_email(email)}"

    def hash_email(self, email: str) -> str:
        """Stable one-way hash of an email address.

        Args:
            email: Email address (case and surrounding whitespace ignored).

        Returns:
            64-character lowercase hex SHA-256 digest.

        Raises:
            ValueError: If email is empty or whitespace.
        """
        normalized = self._require(email, "email").strip().lower()
        return hashlib.sha256(normalized.encode("utf-8")).hexdigest()

    def build_customer_tag(self, customer_id: str) -> str:
        """Tag shared by every cached form of one customer."""
        return self.build_customer_key(customer_id)

    def build_customer_email_tag(self, email: str) -> str:
        """Tag of the email-keyed entry for one email address."""
        return self.build_customer_email_key(email)

    @staticmethod
    def _require(value: str, name: str) -> str:
        if not value or not value.strip():
            raise ValueError(f"{name} must not be empty")
        return value
