"""In-memory translation catalogs with a locale fallback chain.

Catalogs are nested dicts per locale, addressed with dotted keys::

    store.store_translations("en", {"simple_form": {"labels": {"age": "Age"}}})
    store.lookup("simple_form.labels.age", "en")  # -> "Age"

Only string leaves are returned; a key that points at a sub-tree is absent.
"""

from __future__ import annotations

import copy
import json
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator, Mapping, Optional, Protocol, Sequence

logger = logging.getLogger("labels")


class Translator(Protocol):
    def lookup(self, key: str, locale: Optional[str] = None) -> Optional[str]: ...


def _deep_merge(target: dict, data: Mapping[str, Any]) -> None:
    for key, value in data.items():
        key = str(key)
        if isinstance(value, Mapping) and isinstance(target.get(key), dict):
            _deep_merge(target[key], value)
        elif isinstance(value, Mapping):
            target[key] = {}
            _deep_merge(target[key], value)
        else:
            target[key] = value


class TranslationStore:
    """Per-locale nested catalogs implementing the ``Translator`` protocol.

    Lookup walks ``fallbacks[locale]`` when configured, otherwise the
    locale itself, its base language (``pt-BR`` -> ``pt``) and finally the
    default locale.
    """

    def __init__(
        self,
        catalogs: Optional[Mapping[str, Mapping[str, Any]]] = None,
        *,
        default_locale: str = "en",
        fallbacks: Optional[Mapping[str, Sequence[str]]] = None,
    ) -> None:
        self.default_locale = default_locale
        self.fallbacks: dict[str, list[str]] = {
            k: list(v) for k, v in (fallbacks or {}).items()
        }
        self._catalogs: dict[str, dict] = {}
        for locale, data in (catalogs or {}).items():
            self.store_translations(locale, data)

    # ------------------------------------------------------------------
    # Catalog management
    # ------------------------------------------------------------------

    @property
    def locales(self) -> list[str]:
        return sorted(self._catalogs)

    def store_translations(self, locale: str, data: Mapping[str, Any]) -> None:
        """Deep-merge *data* into the catalog for *locale*."""
        _deep_merge(self._catalogs.setdefault(locale, {}), data)

    @contextmanager
    def scoped(self, locale: str, data: Mapping[str, Any]) -> Iterator[TranslationStore]:
        """Temporarily merge *data*; the previous catalog is restored on exit."""
        saved = copy.deepcopy(self._catalogs.get(locale))
        self.store_translations(locale, data)
        try:
            yield self
        finally:
            if saved is None:
                self._catalogs.pop(locale, None)
            else:
                self._catalogs[locale] = saved

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def fallback_chain(self, locale: Optional[str]) -> list[str]:
        """Locales consulted for *locale*, in order, without duplicates."""
        locale = locale or self.default_locale
        if locale in self.fallbacks:
            chain = [locale, *self.fallbacks[locale]]
        else:
            chain = [locale]
            if "-" in locale:
                chain.append(locale.split("-", 1)[0])
            chain.append(self.default_locale)
        seen: list[str] = []
        for item in chain:
            if item not in seen:
                seen.append(item)
        return seen

    def _find(self, locale: str, key: str) -> Optional[str]:
        node: Any = self._catalogs.get(locale)
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                return None
            node = node[part]
        return node if isinstance(node, str) else None

    def lookup(self, key: str, locale: Optional[str] = None) -> Optional[str]:
        for candidate in self.fallback_chain(locale):
            value = self._find(candidate, key)
            if value is not None:
                return value
        return None


def load_catalog_dir(store: TranslationStore, path: str | Path) -> list[str]:
    """Load every ``<locale>.json`` file in *path* into *store*.

    Returns the locales that were loaded. Files that are not valid JSON
    objects are skipped with a warning.
    """
    loaded: list[str] = []
    directory = Path(path)
    if not directory.is_dir():
        logger.warning("translations directory not found: %s", directory)
        return loaded
    for file in sorted(directory.glob("*.json")):
        try:
            data = json.loads(file.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("skipping catalog %s: %s", file.name, exc)
            continue
        if not isinstance(data, dict):
            logger.warning("skipping catalog %s: not a JSON object", file.name)
            continue
        store.store_translations(file.stem, data)
        loaded.append(file.stem)
    return loaded
