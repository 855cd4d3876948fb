import pytest

from inflation_dash import seed
from inflation_dash.errors import InvalidInputError


def test_default_collections():
    history = seed.inflation_history()
    assert len(history) == 16
    assert history[0].period == "2022-01"
    assert history[-1].period == "2024-12"
    assert history[-1].value == 33.8
    assert not any(p.is_projected for p in history)

    commodities = seed.commodities()
    assert [c.trend for c in commodities] == ["up", "up", "up", "down", "stable"]
    assert len({c.id for c in commodities}) == len(commodities)

    labels = [i.label for i in seed.indicators()]
    assert labels[0] == "Headline Inflation"
    assert len(labels) == 4


def test_accessors_return_fresh_lists():
    assert seed.commodities() is not seed.commodities()


def test_load_seed_without_path_uses_defaults():
    assert seed.load_seed(None) == seed.default_seed()


def test_load_seed_from_yaml_with_fallbacks(tmp_path):
    path = tmp_path / "seed.yaml"
    path.write_text(
        "history:\n"
        "  - {period: '2025-01', value: 24.5}\n"
        "  - ['2025-02', 23.2]\n"
        "commodities:\n"
        "  - {id: a, name: Beans, category: Food, current_price: 2000, previous_price: 2100, unit: mudu}\n",
        encoding="utf-8",
    )
    s = seed.load_seed(path)
    assert [p.period for p in s.history] == ["2025-01", "2025-02"]
    assert s.commodities[0].name == "Beans"
    assert s.commodities[0].trend == "down"
    assert s.indicators == seed.indicators()


def test_load_seed_rejects_bad_rows(tmp_path):
    path = tmp_path / "seed.yaml"
    path.write_text("history:\n  - {period: '2025-13', value: 1}\n", encoding="utf-8")
    with pytest.raises(InvalidInputError):
        seed.load_seed(path)
