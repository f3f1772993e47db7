import pytest
from bs4 import BeautifulSoup

from config import Settings
from translations.store import TranslationStore


class User:
    """Model stand-in: column types, values, no human-name hook."""

    COLUMNS = {
        "name": "string",
        "description": "text",
        "created_at": "datetime",
        "born_at": "date",
        "active": "boolean",
        "age": "integer",
        "credit_limit": "decimal",
    }

    def __init__(self, **values):
        self.name = values.get("name", "New in SimpleForm!")
        self.description = values.get("description", "Hello!")
        self.created_at = values.get("created_at")
        self.born_at = values.get("born_at")
        self.active = values.get("active", False)
        self.age = values.get("age")
        self.credit_limit = values.get("credit_limit")

    def column_for_attribute(self, attribute):
        return self.COLUMNS.get(attribute)


class SuperUser(User):
    @classmethod
    def human_attribute_name(cls, attribute):
        return f"Super User {attribute.replace('_', ' ').capitalize()}!"


@pytest.fixture
def user():
    return User()


@pytest.fixture
def super_user():
    return SuperUser()


@pytest.fixture
def store():
    return TranslationStore(default_locale="en")


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def select():
    """CSS-select over rendered markup, like ``assert_select``."""

    def _select(markup, css):
        return BeautifulSoup(markup, "lxml").select(css)

    return _select
