# path: src/footyai/auth/credentials.py
"""
Credential presence check for the Gemini API key.

An environment-level key (``GEMINI_API_KEY`` / ``API_KEY``) always wins. When
it is absent, a host-provided key selector is asked whether the user has
picked a key. Connecting through the selector marks the key as present
without verifying it; an invalid key surfaces on the next analysis as a
``ReauthNeededError``, which calls :meth:`CredentialManager.invalidate`.
"""

from __future__ import annotations

from typing import MutableMapping, Optional, Protocol

from footyai.utils.logging_utils import get_logger

logger = get_logger(__name__)

SESSION_KEY_FIELD = "gemini_api_key"


class KeySelector(Protocol):
    """Host helper that lets the user pick an API key."""

    def has_selected_api_key(self) -> bool: ...

    def open_select_key(self) -> None: ...

    def selected_api_key(self) -> Optional[str]: ...


class SessionKeySelector:
    """
    Key selector backed by a mutable mapping, such as Streamlit session state.

    ``pending_key`` is what the user typed into the key form; ``open_select_key``
    stores it as the selected key.
    """

    def __init__(self, store: MutableMapping, pending_key: Optional[str] = None):
        self.store = store
        self.pending_key = pending_key

    def has_selected_api_key(self) -> bool:
        return bool(self.store.get(SESSION_KEY_FIELD))

    def open_select_key(self) -> None:
        key = (self.pending_key or "").strip()
        if key:
            self.store[SESSION_KEY_FIELD] = key
        else:
            logger.warning("Key selection finished without a key.")

    def selected_api_key(self) -> Optional[str]:
        return self.store.get(SESSION_KEY_FIELD) or None

    def clear(self) -> None:
        self.store.pop(SESSION_KEY_FIELD, None)


class CredentialManager:
    """Tracks whether a usable Gemini API key is available."""

    def __init__(
        self,
        env_key: Optional[str] = None,
        selector: Optional[KeySelector] = None,
    ) -> None:
        self.env_key = env_key or None
        self.selector = selector
        self.has_key = True

    def check(self) -> bool:
        """Load-time check; sets and returns ``has_key``."""
        if self.env_key:
            self.has_key = True
        elif self.selector is not None:
            self.has_key = bool(self.selector.has_selected_api_key())
        else:
            self.has_key = False
        logger.info("Credential check: has_key=%s", self.has_key)
        return self.has_key

    def connect(self) -> bool:
        """
        Open the selector's key flow and assume it succeeded.

        Returns False (and changes nothing) when there is no selector.
        """
        if self.selector is None:
            return False
        self.selector.open_select_key()
        self.has_key = True
        return True

    def invalidate(self) -> None:
        """Mark the key as unusable after the provider rejected it."""
        self.has_key = False

    def resolve_api_key(self) -> Optional[str]:
        """Return the key to inject into the analyzer, or None."""
        if self.env_key:
            return self.env_key
        if self.selector is not None:
            return self.selector.selected_api_key()
        return None
