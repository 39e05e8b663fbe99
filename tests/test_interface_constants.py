from interface.constants import LANG_PACK, TIMESTAMP_FORMAT
from interface.i18n import available_languages, effective_lang, translate, translation_table


def test_constants_values_present():
    assert "en" in LANG_PACK and "ru" in LANG_PACK
    assert LANG_PACK["en"]["HEADER_SEARCH"] == "Search TODOs"
    assert TIMESTAMP_FORMAT == "%Y-%m-%d %H:%M"


def test_every_language_table_has_every_key():
    keys = set(LANG_PACK["en"])
    for lang in available_languages():
        assert keys <= set(translation_table(lang)), lang
    assert translation_table("xx") is translation_table("en")


def test_translate_formats_and_falls_back(monkeypatch):
    assert translate("STATUS_PRIORITY", "en", task_id=3, priority="P0") == "#3 is now P0"
    assert translate("NO_SUCH_KEY") == "NO_SUCH_KEY"
    # missing placeholders leave the template intact
    assert translate("STATUS_DONE", other=1) == "Marked #{task_id} done"

    monkeypatch.setenv("TODO_LANG", "ru")
    assert effective_lang() == "ru"
    assert translate("HEADER_NEW") == "Новая задача"
    assert "STATUS_NOTHING_TO_SAVE" not in LANG_PACK["ru"]
    assert translate("STATUS_NOTHING_TO_SAVE") == LANG_PACK["en"]["STATUS_NOTHING_TO_SAVE"]


def test_unknown_env_language_falls_back_to_english(monkeypatch):
    monkeypatch.setenv("TODO_LANG", "klingon")
    assert effective_lang() == "en"


def test_tests_run_in_english_by_default(monkeypatch):
    monkeypatch.delenv("TODO_LANG", raising=False)
    assert effective_lang("ru") == "en"
