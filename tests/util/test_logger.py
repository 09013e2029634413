import pytest
from loguru import logger

from src.util import logger as log_config


def make_record(component, level):
    return {"extra": {"component": component}, "level": logger.level(level)}


class TestComponentFilter:
    def test_default_levels(self):
        assert not log_config.component_filter(make_record("parser", "INFO"))
        assert log_config.component_filter(make_record("parser", "WARNING"))
        assert log_config.component_filter(make_record("cli", "DEBUG"))

    def test_set_component_level(self, monkeypatch):
        monkeypatch.setitem(log_config.LEVEL_PER_COMPONENT, "ucs_solver", "INFO")
        assert not log_config.component_filter(make_record("ucs_solver", "DEBUG"))

        log_config.set_component_level("ucs_solver", "DEBUG")
        assert log_config.component_filter(make_record("ucs_solver", "DEBUG"))

    def test_unknown_level(self):
        with pytest.raises(ValueError):
            log_config.set_component_level("parser", "CHATTY")

    def test_formatter_names_component(self):
        template = log_config.formatter(make_record("ucs_solver", "INFO"))
        assert "ucs_solver" in template
        assert "<green>" in template

    def test_formatter_shows_search_progress(self):
        record = make_record("ucs_solver", "DEBUG")
        record["extra"].update(expansions=10_000, cost=4600)

        template = log_config.formatter(record)
        assert "{extra[expansions]} expanded" in template
        assert "cost {extra[cost]}" in template
        assert template.endswith("\n")

    def test_formatter_without_progress(self):
        template = log_config.formatter(make_record("parser", "WARNING"))
        assert "extra[" not in template
