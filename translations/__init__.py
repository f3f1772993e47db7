"""Translation lookup: in-memory catalogs and a remote catalog client."""

from translations.remote import RemoteCatalogClient
from translations.store import TranslationStore, Translator, load_catalog_dir

__all__ = ["RemoteCatalogClient", "TranslationStore", "Translator", "load_catalog_dir"]
