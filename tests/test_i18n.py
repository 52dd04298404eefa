from utils import i18n
from utils.i18n import EN, ES, get_language, set_language, t


def test_catalogues_have_same_keys():
    assert set(EN) == set(ES)


def test_spanish_and_english_labels():
    set_language("es")
    assert t("common.save") == "Guardar"
    assert t("dashboard.welcome", name="Ana") == "Hola, Ana"
    set_language("en")
    assert t("nav.dashboard") == "Dashboard"


def test_missing_key_falls_back(monkeypatch):
    set_language("es")
    monkeypatch.setitem(EN, "only.english", "English only")
    assert t("only.english") == "English only"
    assert t("no.such.key") == "no.such.key"


def test_bad_params_return_raw_text():
    assert t("dashboard.welcome", other="x") == "Hello, {name}"


def test_unknown_language_uses_spanish(caplog):
    set_language("fr")
    assert get_language() == i18n.DEFAULT_LANGUAGE == "es"
    assert "Unsupported language" in caplog.text
