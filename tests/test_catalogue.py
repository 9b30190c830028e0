import logging

import pytest

from foodie.catalogue import Catalogue
from foodie.config import CatalogueConfig
from foodie.observability.hooks import DemoEvent
from foodie.observability.logging import get_logger
from foodie.patterns.base import PatternDemo, PatternGroup


class ExplodingDemo(PatternDemo):
    name = "exploding"
    group = PatternGroup.BEHAVIORAL

    def run(self, verbose=False):
        raise RuntimeError("boom")


def test_builtin_demos_are_registered(catalogue):
    assert catalogue.list_demos(PatternGroup.BEHAVIORAL) == [
        "observer",
        "strategy",
        "command",
        "state",
        "chain",
    ]
    assert catalogue.list_demos(PatternGroup.STRUCTURAL) == [
        "adapter",
        "decorator",
        "facade",
        "composite",
        "proxy",
    ]
    assert catalogue.list_demos(PatternGroup.CREATIONAL) == [
        "factory",
        "abstract_factory",
        "builder",
        "singleton",
        "prototype",
    ]
    assert len(catalogue.list_demos()) == 15


def test_unknown_demo_raises(catalogue):
    with pytest.raises(ValueError):
        catalogue.run("visitor")


def test_duplicate_registration_raises(catalogue):
    demo_cls = type(catalogue.get_demo("state"))
    with pytest.raises(ValueError):
        catalogue.register(demo_cls)


def test_run_triggers_start_and_end_hooks(catalogue, hooks):
    seen = []
    hooks.subscribe(lambda run: seen.append((run.event, run.demo)))

    catalogue.run("state")

    assert seen == [
        (DemoEvent.START, "state"),
        (DemoEvent.END, "state"),
    ]


def test_failing_demo_triggers_error_hook_and_reraises(catalogue, hooks):
    errors = []
    hooks.subscribe(errors.append, DemoEvent.ERROR)
    catalogue.register(ExplodingDemo)

    with pytest.raises(RuntimeError):
        catalogue.run("exploding")

    assert len(errors) == 1
    assert str(errors[0].error) == "boom"
    assert errors[0].duration_ms is not None


def test_module_loggers_carry_session_during_run(catalogue, caplog):
    with caplog.at_level(logging.INFO, logger="foodie"):
        catalogue.run("observer")

    kitchen = [r for r in caplog.records if r.name == "foodie.behavioral.observer"]
    assert kitchen
    assert {r.session_id for r in caplog.records} == {"test-session"}


def test_session_is_not_leaked_after_run(catalogue, caplog):
    catalogue.run("state")
    with caplog.at_level(logging.INFO, logger="foodie"):
        get_logger("outside").info("after run")

    assert not hasattr(caplog.records[-1], "session_id")


def test_observer_demo(catalogue):
    result = catalogue.run("observer")
    assert result["messages"] == [
        "Cocina: preparando pedido 7264526",
        "Delivery: esperando pedido 7264526",
    ]


def test_observer_demo_uses_configured_order_id(hooks):
    catalogue = Catalogue(CatalogueConfig(order_id="1"), hooks=hooks)
    assert catalogue.run("observer")["order_id"] == "1"


def test_strategy_demo(catalogue):
    result = catalogue.run("strategy")
    assert result["costs"] == {"DistanceShipping": 100 * 1.2, "FreeShipping": 0}


def test_command_demo(catalogue):
    result = catalogue.run("command")
    assert result["after_execute"] == ["Pizza"]
    assert result["after_undo"] == []
    assert result["logs"] == ["Agregado Pizza", "Eliminado Pizza"]


def test_state_demo(catalogue):
    result = catalogue.run("state")
    assert result["statuses"] == [
        "nuevo",
        "En cocina",
        "En entrega",
        "Entregado",
        "Entregado",
    ]
    assert result["delivered"] is True


def test_chain_demo(catalogue):
    approvals = [r["approved"] for r in catalogue.run("chain")["results"]]
    assert approvals == [False, False, True]


def test_structural_group(catalogue):
    results = catalogue.run_group(PatternGroup.STRUCTURAL)

    assert results["adapter"]["receipt"] == "Paying $100 with Stripe"
    assert results["decorator"] == {
        "description": "Comida with extra cheese with extra bacon",
        "cost": 150,
    }
    assert results["facade"]["steps"][0] == "Orden creada"
    assert results["composite"] == {"name": "Combo Pizza, Empanada", "price": 150}
    assert results["proxy"]["first"] == results["proxy"]["second"]
    assert results["proxy"]["lookups"] == 1


def test_creational_group(catalogue):
    results = catalogue.run_group(PatternGroup.CREATIONAL)

    assert results["factory"] == {"prepared": "prepare pizza", "rejected": "sushi"}
    assert results["abstract_factory"]["menus"]["argentinian"] == [
        "prepare argentinian pizza",
        "prepare argentinian empanada",
    ]
    assert results["builder"]["descriptions"][1] == (
        "La lasaña es de tamaño pequeña y tiene queso mozzarella"
    )
    assert results["singleton"] == {
        "seen": {"apiUrl": "https://api.foodieapp.com"},
        "same_instance": True,
    }
    assert results["prototype"]["original"] == ["pizza", "empanada"]
    assert results["prototype"]["cloned"] == ["pizza", "empanada", "sushi"]


def test_run_all_respects_enabled_groups(hooks):
    catalogue = Catalogue(CatalogueConfig(groups=["creational"]), hooks=hooks)
    assert list(catalogue.run_all()) == catalogue.list_demos(PatternGroup.CREATIONAL)


def test_run_all_runs_everything(catalogue):
    assert len(catalogue.run_all()) == 15


def test_verbose_prints_headers(catalogue, capsys):
    catalogue.run_group(PatternGroup.BEHAVIORAL, verbose=True)
    out = capsys.readouterr().out
    assert "# Behavioral patterns" in out
    assert "[state]" in out
