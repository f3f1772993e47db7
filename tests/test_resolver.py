import pytest

from labels.human_names import MappingHumanNameProvider, NullHumanNameProvider
from labels.resolver import required_marker, resolve, translate
from models.field import FieldDescriptor, LabelOptions, ResolvedLabel


def field(attribute="name", object_name="user", input_type="string"):
    return FieldDescriptor(
        object_type_name=object_name, attribute_name=attribute, input_type=input_type
    )


class ExplodingTranslator:
    def __init__(self):
        self.calls = 0

    def lookup(self, key, locale=None):
        self.calls += 1
        raise RuntimeError("backend misconfigured")


class RecordingTranslator:
    def __init__(self, values=None):
        self.values = values or {}
        self.keys = []

    def lookup(self, key, locale=None):
        self.keys.append(key)
        return self.values.get(key)


@pytest.mark.parametrize("attribute", ["name", "age", "credit_limit"])
def test_label_false_is_not_visible(attribute, store):
    resolved = resolve(field(attribute), LabelOptions(label=False, required=True), store)
    assert resolved == ResolvedLabel.hidden()
    assert resolved.text == ""
    assert resolved.css_classes == frozenset()
    assert resolved.required_marker is None


def test_hidden_input_is_not_visible_regardless_of_options(store):
    options = LabelOptions(label="Shown?", required=True, html={"id": "x"})
    resolved = resolve(field(input_type="hidden"), options, store)
    assert resolved.visible is False
    assert resolved.for_id == ""


def test_explicit_label_bypasses_lookups():
    translator = RecordingTranslator({"simple_form.labels.user.name": "Nome"})
    resolved = resolve(
        field(),
        LabelOptions(label="My label!"),
        translator,
        human_names=MappingHumanNameProvider({"name": "Full name"}),
    )
    assert resolved.text == "My label!"
    assert translator.keys == []


def test_type_specific_key_beats_attribute_key(store):
    store.store_translations(
        "en",
        {
            "simple_form": {
                "labels": {
                    "age": "Idade",
                    "super_user": {"description": "Descrição"},
                }
            }
        },
    )
    assert resolve(field("description", "super_user"), None, store).text == "Descrição"
    assert resolve(field("age", "super_user"), None, store).text == "Idade"
    assert resolve(field("age", "user"), None, store).text == "Idade"
    assert resolve(field("description", "user"), None, store).text == "Description"


def test_attribute_key_beats_human_name(store):
    store.store_translations("en", {"simple_form": {"labels": {"name": "Nome"}}})
    names = MappingHumanNameProvider({"name": "Full name"})
    assert resolve(field(), None, store, human_names=names).text == "Nome"


def test_human_name_beats_humanized(store):
    names = MappingHumanNameProvider({"name": "Full name"})
    assert resolve(field(), None, store, human_names=names).text == "Full name"
    assert resolve(field("age"), None, store, human_names=names).text == "Age"


def test_humanized_fallback(store):
    resolved = resolve(field("credit_limit", input_type="numeric"), None, store)
    assert resolved.text == "Credit limit"
    assert resolved.css_classes == frozenset({"numeric"})


def test_malformed_label_option_uses_fallback(store):
    options = LabelOptions(label=42)
    assert options.label is None
    assert resolve(field("born_at"), options, store).text == "Born at"


def test_missing_translator_falls_back_to_humanized():
    resolved = resolve(field("credit_limit"), LabelOptions(required=True), None)
    assert resolved.text == "Credit limit"
    assert resolved.required_marker == '<abbr title="required">*</abbr>'


def test_failing_translator_degrades_without_raising():
    translator = ExplodingTranslator()
    resolved = resolve(field(), LabelOptions(required=True), translator)
    assert resolved.text == "Name"
    assert resolved.required_marker == '<abbr title="required">*</abbr>'
    assert translator.calls > 0


def test_translate_ignores_non_string_values():
    assert translate(RecordingTranslator({"k": 3}), "k") is None


@pytest.mark.parametrize(
    "input_type", ["string", "text", "datetime", "date", "boolean", "numeric"]
)
def test_css_classes_mirror_input_type(input_type, store):
    resolved = resolve(field(input_type=input_type), LabelOptions(required=False), store)
    assert resolved.css_classes == frozenset({input_type})


def test_required_adds_class_and_default_marker(store):
    resolved = resolve(field(), LabelOptions(required=True), store)
    assert resolved.css_classes == frozenset({"string", "required"})
    assert resolved.required_marker == '<abbr title="required">*</abbr>'


def test_required_none_counts_as_not_required(store):
    resolved = resolve(field(), LabelOptions(), store)
    assert "required" not in resolved.css_classes
    assert resolved.required_marker is None


def test_required_mark_and_text_from_i18n(store):
    store.store_translations(
        "en", {"simple_form": {"required": {"mark": "*-*", "text": "campo requerido"}}}
    )
    assert required_marker(store) == '<abbr title="campo requerido">*-*</abbr>'


def test_required_string_template_replaces_wrapper(store):
    template = '<span class="required" title="requerido">*</span>'
    store.store_translations("en", {"simple_form": {"required": {"string": template}}})
    resolved = resolve(field(), LabelOptions(required=True), store)
    assert resolved.required_marker == template
    assert "required" in resolved.css_classes


def test_for_id_uses_explicit_html_id(store):
    resolved = resolve(field(), LabelOptions(html={"id": "my_new_id"}), store)
    assert resolved.for_id == "my_new_id"


def test_for_id_defaults_to_object_attribute(store):
    resolved = resolve(field(), LabelOptions(html={"class": "test"}), store)
    assert resolved.for_id == "user_name"


def test_locale_is_passed_to_lookups(store):
    store.store_translations("pt", {"simple_form": {"labels": {"age": "Idade"}}})
    assert resolve(field("age"), None, store, locale="pt-BR").text == "Idade"
    assert resolve(field("age"), None, store, locale="en").text == "Age"


def test_resolving_twice_is_identical(store):
    store.store_translations("en", {"simple_form": {"labels": {"age": "Idade"}}})
    options = LabelOptions(required=True, html={"id": "x"}, label_html={"class": "big"})
    names = NullHumanNameProvider()
    first = resolve(field("age", input_type="numeric"), options, store, human_names=names)
    second = resolve(field("age", input_type="numeric"), options, store, human_names=names)
    assert first == second
