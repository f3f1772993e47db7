from config import Settings
from forms.builder import FormBuilder
from labels.human_names import MappingHumanNameProvider

from conftest import User


class Post:
    title = "Hello"

    def attribute_required(self, attribute):
        return attribute == "title"


def test_object_name_defaults_to_underscored_class(super_user, store, settings):
    assert FormBuilder(super_user, translator=store, settings=settings).object_name == "super_user"
    assert FormBuilder(None, settings=settings).object_name == "form"


def test_required_predicate_order(store):
    post = Post()
    builder = FormBuilder(post, translator=store, settings=Settings(required_by_default=False))
    assert builder.is_required("title") is True
    assert builder.is_required("body") is False
    assert builder.is_required("body", True) is True

    plain = FormBuilder(User(), settings=Settings(required_by_default=False))
    assert plain.is_required("name") is False


def test_label_only(user, store, settings, select):
    builder = FormBuilder(user, translator=store, settings=settings)
    html = builder.label("credit_limit", required=False)
    assert select(html, "label.numeric[for=user_credit_limit]")[0].get_text() == "Credit limit"
    assert builder.label("name", as_="hidden") == ""


def test_input_value_from_object(store, settings, select):
    builder = FormBuilder(User(name="Ana", age=30), translator=store, settings=settings)
    assert select(builder.input("name"), "input#user_name[value=Ana]")
    assert select(builder.input("age"), "input[type=number][value='30']")


def test_builder_locale(user, store, settings, select):
    store.store_translations("pt", {"simple_form": {"labels": {"age": "Idade"}}})
    builder = FormBuilder(user, translator=store, settings=settings, locale="pt-BR")
    assert "Idade" in select(builder.input("age"), "label")[0].get_text()


def test_explicit_human_names(user, store, settings, select):
    builder = FormBuilder(
        user,
        translator=store,
        settings=settings,
        human_names=MappingHumanNameProvider({"born_at": "Birthday"}),
    )
    assert "Birthday" in select(builder.input("born_at"), "label.date")[0].get_text()


def test_custom_object_name(user, store, settings, select):
    builder = FormBuilder(user, object_name="account", translator=store, settings=settings)
    html = builder.input("name")
    assert select(html, "label[for=account_name]")
    assert select(html, "input[name='account[name]']")


def test_select_input_as_option(store, settings, select):
    builder = FormBuilder(User(), translator=store, settings=settings)
    html = builder.input("name", as_="select", collection=["Ana", "New in SimpleForm!"])
    assert select(html, "label.select.required[for=user_name]")
    assert select(html, "select#user_name")
    assert select(html, "option[selected]")[0].get_text() == "New in SimpleForm!"
