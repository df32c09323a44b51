"""Active-locale translation state with lazy catalog loading.

TranslationManager holds two catalogs: the default locale's translations,
supplied up front, and the active locale's translations, loaded on demand
from a CatalogLoader and overlaid on the defaults. Keys missing from the
active catalog therefore resolve to their default-locale text.

Load lifecycle:

    IDLE --init()--> READY                      (active locale is the default)
    IDLE --init()--> LOADING --> READY          (active locale differs)
    READY --set_locale()--> LOADING --> READY

At most one load per locale is in flight. A thread that requests a locale
already being loaded waits for that load instead of starting another one.
A load that finishes after the active locale has moved on is discarded.

Load failures never escape: a missing or malformed catalog, or any other error
raised by the loader, is logged and the manager falls back to the default
translations. Observers are notified after the load has been released, so
they may switch locales themselves.

Python 3.13+.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Mapping
from concurrent.futures import Future, wait

from transchoice.constants import DEFAULT_LOCALE
from transchoice.core.values import Count
from transchoice.diagnostics.errors import CatalogError, CatalogNotFoundError
from transchoice.enums import LoadState
from transchoice.localization.loading import CatalogLoader
from transchoice.localization.types import (
    LocaleCode,
    MessageKey,
    TranslationData,
    TranslationObserver,
)
from transchoice.runtime.interpolation import ReplacementMap, apply_replacements
from transchoice.runtime.selector import choose_plural_form

__all__ = ["TranslationManager"]

logger = logging.getLogger(__name__)

# Observers to call and the translations to hand them, collected under the lock
type _Notification = tuple[list[TranslationObserver], TranslationData]


class TranslationManager:
    """Key-based translation lookup for one active locale.

    Thread-safe: state changes happen under an internal lock, and observer
    callbacks run outside it.

    Example:
        >>> manager = TranslationManager(
        ...     DictCatalogLoader({"ru": {"apples": ":count яблоко|:count яблока|:count яблок"}}),
        ...     default_translations={"apples": ":count apple|:count apples"},
        ... )
        >>> manager.trans_choice("apples", 3)
        '3 apples'
        >>> manager.set_locale("ru")
        >>> manager.trans_choice("apples", 3)
        '3 яблока'
    """

    __slots__ = (
        "_current_locale",
        "_default_locale",
        "_defaults",
        "_in_flight",
        "_initialized",
        "_loader",
        "_lock",
        "_observers",
        "_state",
        "_translations",
    )

    def __init__(
        self,
        loader: CatalogLoader | None = None,
        *,
        default_locale: LocaleCode = DEFAULT_LOCALE,
        locale: LocaleCode | None = None,
        default_translations: Mapping[MessageKey, str] | None = None,
    ) -> None:
        """Initialize the manager.

        Args:
            loader: Source of non-default catalogs (optional)
            default_locale: Locale of the default translations
            locale: Initially active locale (defaults to default_locale)
            default_translations: When given, init() is called immediately
        """
        self._loader = loader
        self._default_locale: LocaleCode = default_locale
        self._current_locale: LocaleCode = locale or default_locale
        self._defaults: TranslationData = {}
        self._translations: TranslationData = {}
        self._observers: list[TranslationObserver] = []
        self._in_flight: dict[LocaleCode, Future[None]] = {}
        self._state = LoadState.IDLE
        self._initialized = False
        self._lock = threading.Lock()

        if default_translations is not None:
            self.init(default_translations)

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"TranslationManager(locale={self._current_locale!r}, "
            f"default_locale={self._default_locale!r}, "
            f"state={self._state.value!r}, keys={len(self._translations)})"
        )

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def init(
        self,
        default_translations: Mapping[MessageKey, str],
        default_locale: LocaleCode | None = None,
    ) -> None:
        """Install the default translations and load the active locale.

        Only the first call has any effect.

        Args:
            default_translations: Default-locale key -> template map
            default_locale: Overrides the constructor's default locale
        """
        with self._lock:
            if self._initialized:
                return
            self._initialized = True
            self._defaults = dict(default_translations)
            self._translations = dict(self._defaults)
            if default_locale:
                self._default_locale = default_locale
            locale = self._current_locale

        logger.debug(
            "TranslationManager initialized: %d default keys, locale=%s",
            len(self._defaults),
            locale,
        )
        self._load_translations(locale)

    def set_locale(self, locale: LocaleCode) -> None:
        """Switch the active locale and load its catalog.

        Returns once the catalog is in place (or the fallback applied).
        Setting the already active locale does nothing.
        """
        with self._lock:
            if locale == self._current_locale:
                return
            self._current_locale = locale

        logger.info("Switching locale to %s", locale)
        self._load_translations(locale)

    def ready(self, timeout: float | None = None) -> bool:
        """Wait for in-flight catalog loads to finish.

        Args:
            timeout: Seconds to wait at most, None to wait indefinitely

        Returns:
            True if no load is still pending
        """
        with self._lock:
            pending = list(self._in_flight.values())
        if not pending:
            return True
        _, not_done = wait(pending, timeout=timeout)
        return not not_done

    def _load_translations(self, locale: LocaleCode) -> None:
        if not locale or locale == self._default_locale:
            self._notify(self._apply(locale, {}))
            return

        with self._lock:
            future = self._in_flight.get(locale)
            owner = future is None
            if future is None:
                future = Future()
                self._in_flight[locale] = future
                self._state = LoadState.LOADING

        if not owner:
            logger.debug("Awaiting in-flight catalog load for locale %s", locale)
            future.result()
            return

        try:
            notification = self._apply(locale, self._fetch(locale))
        except Exception as e:
            self._finish_load(locale)
            future.set_exception(e)
            raise
        # Resolved before observers run, so an observer may request this locale again
        self._finish_load(locale)
        future.set_result(None)
        self._notify(notification)

    def _finish_load(self, locale: LocaleCode) -> None:
        with self._lock:
            self._in_flight.pop(locale, None)
            if not self._in_flight and self._state is LoadState.LOADING:
                # Only stale loads ran; the active catalog is already in place
                self._state = LoadState.READY

    def _fetch(self, locale: LocaleCode) -> TranslationData:
        if self._loader is None:
            logger.warning("No catalog loader configured; using defaults for locale %s", locale)
            return {}
        try:
            return self._loader.load(locale)
        except CatalogNotFoundError:
            logger.warning("Translation catalog not found for locale: %s", locale)
        except (CatalogError, OSError, ValueError) as e:
            logger.error("Failed to load translations for locale '%s': %s", locale, e)
        except Exception:
            logger.exception("Catalog loader failed for locale '%s'", locale)
        return {}

    def _apply(
        self, locale: LocaleCode, catalog: TranslationData
    ) -> _Notification | None:
        with self._lock:
            if locale != self._current_locale:
                logger.debug("Discarding catalog for inactive locale %s", locale)
                return None
            self._translations = {**self._defaults, **catalog}
            self._state = LoadState.READY
            return (list(self._observers), dict(self._translations))

    @staticmethod
    def _notify(notification: _Notification | None) -> None:
        if notification is None:
            return
        observers, snapshot = notification
        for callback in observers:
            callback(snapshot)

    # ------------------------------------------------------------------
    # Observation
    # ------------------------------------------------------------------

    def subscribe(self, callback: TranslationObserver) -> Callable[[], None]:
        """Register a callback for translation changes.

        The callback is invoked immediately with the current translations
        and again after every catalog change.

        Returns:
            Function that removes the subscription
        """
        with self._lock:
            self._observers.append(callback)
            snapshot = dict(self._translations)
        callback(snapshot)

        def unsubscribe() -> None:
            with self._lock:
                if callback in self._observers:
                    self._observers.remove(callback)

        return unsubscribe

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def current_locale(self) -> LocaleCode:
        """Active locale code."""
        return self._current_locale

    @property
    def default_locale(self) -> LocaleCode:
        """Locale of the default translations."""
        return self._default_locale

    @property
    def state(self) -> LoadState:
        """Current load state."""
        return self._state

    @property
    def translations(self) -> TranslationData:
        """Copy of the active key -> template map."""
        with self._lock:
            return dict(self._translations)

    def get(self, key: MessageKey) -> str | None:
        """Return the raw template for a key, None if absent."""
        return self._translations.get(key)

    def has(self, key: MessageKey) -> bool:
        """Check whether a key has a translation."""
        return key in self._translations

    # ------------------------------------------------------------------
    # Translation
    # ------------------------------------------------------------------

    def _lookup(self, key: MessageKey) -> str | None:
        template = self._translations.get(key)
        if not template:
            logger.warning(
                "Translation key '%s' not found for locale '%s'", key, self._current_locale
            )
            return None
        return template

    def trans(self, key: MessageKey, replacements: ReplacementMap | None = None) -> str:
        """Translate a key, substituting placeholders.

        Args:
            key: Translation key (e.g., 'auth.failed')
            replacements: Placeholder values

        Returns:
            Translated text, or key itself when it has no translation

        Example:
            >>> manager = TranslationManager(default_translations={"hi": "Hello :Name"})
            >>> manager.trans("hi", {"name": "world"})
            'Hello World'
            >>> manager.trans("missing.key")
            'missing.key'
        """
        template = self._lookup(key)
        if template is None:
            return key
        return apply_replacements(template, replacements)

    def trans_choice(
        self,
        key: MessageKey,
        count: Count,
        replacements: ReplacementMap | None = None,
    ) -> str:
        """Translate a key with pluralization.

        The plural form is chosen with the active locale's rules, and count
        is always available to the template as ":count".

        Args:
            key: Translation key (e.g., 'items.count')
            count: Number driving the plural choice
            replacements: Additional placeholder values

        Returns:
            Translated text, or key itself when it has no translation

        Example:
            >>> manager = TranslationManager(
            ...     default_translations={"items": "{0} No items|{1} :count item|[2,*] :count items"}
            ... )
            >>> manager.trans_choice("items", 0)
            'No items'
            >>> manager.trans_choice("items", 5)
            '5 items'
        """
        template = self._lookup(key)
        if template is None:
            return key
        chosen = choose_plural_form(template, count, self._current_locale)
        return apply_replacements(chosen, {**(replacements or {}), "count": count})
