import pytest

from freight_board.normalize.entries import RecordEntry, Scalar, classify
from freight_board.normalize.extract import display_text, subtitle
from freight_board.normalize.synonyms import (
    DESTINATION_PRIORITY,
    GENERIC_PRIORITY,
    SELECTION_PRIORITY,
    Role,
    lookup,
    lookup_text,
)


def test_classify_tags_entries_once():
    assert classify("x") == Scalar("x")
    assert classify({"a": 1}) == RecordEntry({"a": 1})
    tagged = classify({"a": 1})
    assert classify(tagged) is tagged


@pytest.mark.parametrize(
    "entry, expected",
    [("Carreta", "Carreta"), (42, "42"), (2.5, "2.5"), (True, "true"), (False, "false")],
)
def test_scalars_are_returned_verbatim(entry, expected):
    assert display_text(entry, GENERIC_PRIORITY) == expected


def test_destination_priority_prefers_city():
    assert display_text({"cidade": "SP", "estado": "SP"}, DESTINATION_PRIORITY) == "SP"
    assert display_text({"estado": "RJ", "cidade": "Niterói"}, DESTINATION_PRIORITY) == "Niterói"
    assert display_text({"state": "PR"}, DESTINATION_PRIORITY) == "PR"


@pytest.mark.parametrize("priority", [(), GENERIC_PRIORITY, DESTINATION_PRIORITY, SELECTION_PRIORITY])
def test_selected_type_entry_reads_as_type(priority):
    entry = {"selected": True, "type": "Baú"}
    assert display_text(entry, priority) == "Baú"
    assert display_text(entry, priority, selection=True) == "Baú"


def test_selected_type_overrides_priority():
    entry = {"name": "Cavalo mecânico", "type": "Carreta", "selected": True}
    assert display_text(entry, ("name",), selection=True) == "Carreta"
    assert display_text(entry, ("name",)) == "Cavalo mecânico"


def test_unselected_entry_uses_priority():
    entry = {"name": "Cavalo mecânico", "type": "Carreta", "selected": False}
    assert display_text(entry, ("name",), selection=True) == "Cavalo mecânico"


def test_selected_must_be_literally_true():
    entry = {"nome": "Toco", "type": "Truck", "selected": "true"}
    assert display_text(entry, ("nome",), selection=True) == "Toco"


def test_empty_priority_values_are_skipped():
    assert display_text({"name": "", "nome": "Fulano"}, ("name", "nome")) == "Fulano"


def test_first_string_in_key_order_is_fallback():
    assert display_text({"id": 3, "foo": "bar", "baz": "qux"}, ("name",)) == "bar"


def test_price_table_without_strings_is_summarized():
    entry = {"vehicleType": 7, "ranges": [{"kmStart": 0}, {"kmStart": 100}]}
    assert display_text(entry, GENERIC_PRIORITY) == "7 (2 faixas)"


def test_record_without_text_is_serialized():
    assert display_text({"a": 1}) == '{"a": 1}'
    assert display_text({}) == "{}"


def test_self_referencing_record_does_not_raise():
    record = {"id": 1}
    record["self"] = record
    assert display_text(record).startswith("{")


def test_selection_priority_reads_legacy_labels():
    assert display_text({"value": "bau", "label": "Baú"}, SELECTION_PRIORITY) == "Baú"


def test_subtitle_uses_default_priority():
    assert subtitle({"capacidade": "12t", "peso": 1500}) == "Capacity: 12t"
    assert subtitle({"peso": 1500}) == "Weight: 1500"
    assert subtitle({"cep": "01000-000", "bairro": "Centro"}) == "Postal Code: 01000-000"


def test_subtitle_skips_booleans_and_blank_strings():
    assert subtitle({"capacity": True, "model": "FH 540"}) == "Model: FH 540"
    assert subtitle({"categoria": "   ", "size": 14}) == "Size: 14"


def test_subtitle_empty_cases():
    assert subtitle("Carreta") == ""
    assert subtitle({"name": "x"}) == ""
    assert subtitle({}) == ""


def test_subtitle_custom_priority_and_label():
    assert subtitle({"bairro": "Centro"}, ("bairro",)) == "Neighborhood: Centro"
    assert subtitle({"eixos": 3}, ("eixos",)) == "Eixos: 3"


def test_extractor_is_repeatable():
    entry = {"nome": "Baú", "categoria": "closed"}
    assert display_text(entry, GENERIC_PRIORITY) == display_text(entry, GENERIC_PRIORITY)
    assert subtitle(entry) == subtitle(entry) == "Category: closed"


def test_lookup_follows_synonym_order():
    assert lookup({"city": "Santos", "cidade": "Campinas"}, Role.CITY) == "Campinas"
    assert lookup({"cidade": "", "city": "Santos"}, Role.CITY) == "Santos"
    assert lookup({"km_inicio": 0}, Role.KM_START) == 0
    assert lookup({}, Role.PRICE, default="-") == "-"


def test_lookup_text_accepts_numbers_not_booleans():
    assert lookup_text({"order": 2}, Role.ORDER) == "2"
    assert lookup_text({"category": True, "categoria": "heavy"}, Role.CATEGORY) == "heavy"
    assert lookup_text({"category": ["x"]}, Role.CATEGORY) is None
