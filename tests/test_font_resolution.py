from src.ui.theme import DarkTheme, FraunhoferTheme, resolve_font_family


def test_preferred_family_when_installed():
    assert resolve_font_family("Frutiger LT Com", "Arial", lambda: ["Arial", "Frutiger LT Com"]) == "Frutiger LT Com"


def test_match_is_case_insensitive():
    assert resolve_font_family("Segoe UI", "Arial", lambda: ["segoe ui"]) == "Segoe UI"


def test_fallback_when_missing():
    assert resolve_font_family("Frutiger LT Com", "Arial", lambda: ["Arial", "Helvetica"]) == "Arial"


def test_fallback_when_family_lookup_fails():
    def broken():
        raise OSError("font database unavailable")

    assert resolve_font_family("Frutiger LT Com", "Arial", broken) == "Arial"


def test_resolution_is_deterministic_for_fixed_set():
    installed = ["DejaVu Sans", "Arial"]
    results = {resolve_font_family("Segoe UI", "Arial", lambda: list(installed)) for _ in range(5)}
    assert results == {"Arial"}


def test_theme_uses_injected_family_set(qapp):
    assert FraunhoferTheme(family_provider=lambda: ["Frutiger LT Com"]).font_family == "Frutiger LT Com"
    assert FraunhoferTheme(family_provider=lambda: []).font_family == "Arial"
    dark = DarkTheme(family_provider=lambda: [])
    assert dark.font_family == "Microsoft Sans Serif"
    assert dark.font("body").family() == "Microsoft Sans Serif"
