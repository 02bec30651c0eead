# tests/test_runner.py
"""
Tests for ExampleRunner and the default pages.
"""

import logging

import pytest
from guidedtour import ExampleRunner, TourConfig, default_runner


class TestExampleRunner:
    """Test registration, selection and ordering."""

    def test_registration_order(self):
        runner = ExampleRunner()
        runner.register("b", "B", lambda config: None)
        runner.register("a", "A", lambda config: None)
        assert runner.page_names == ["b", "a"]

    def test_duplicate_name_rejected(self):
        runner = ExampleRunner()
        runner.register("a", "A", lambda config: None)
        with pytest.raises(ValueError, match="already registered"):
            runner.register("a", "Again", lambda config: None)

    def test_unknown_page_rejected(self):
        runner = default_runner()
        with pytest.raises(ValueError, match="Unknown page 'missing'"):
            runner.select(["missing"])

    def test_runs_in_order(self):
        calls = []
        runner = ExampleRunner(TourConfig(show_headers=False))
        for name in ("first", "second", "third"):
            runner.register(name, name.title(), lambda config, name=name: calls.append(name))

        assert runner.run() == ["first", "second", "third"]
        assert calls == ["first", "second", "third"]

    def test_runs_requested_order(self):
        calls = []
        runner = ExampleRunner(TourConfig(show_headers=False))
        for name in ("first", "second"):
            runner.register(name, name.title(), lambda config, name=name: calls.append(name))

        assert runner.run(["second", "first"]) == ["second", "first"]
        assert calls == ["second", "first"]

    def test_pages_receive_config(self):
        config = TourConfig(show_headers=False, server="backup")
        seen = []
        runner = ExampleRunner(config)
        runner.register("probe", "Probe", seen.append)
        runner.run()
        assert seen == [config]

    def test_headers(self, capsys):
        runner = ExampleRunner()
        runner.register("probe", "Probe Page", lambda config: print("body"))
        runner.run()
        out = capsys.readouterr().out
        assert "=== Probe Page ===" in out
        assert out.index("Probe Page") < out.index("body")

    def test_no_headers(self, capsys):
        runner = ExampleRunner(TourConfig(show_headers=False))
        runner.register("probe", "Probe Page", lambda config: print("body"))
        runner.run()
        assert "Probe Page" not in capsys.readouterr().out

    def test_page_errors_propagate(self):
        def broken(config):
            raise RuntimeError("boom")

        runner = ExampleRunner(TourConfig(show_headers=False))
        runner.register("broken", "Broken", broken)
        with pytest.raises(RuntimeError, match="boom"):
            runner.run()

    def test_verbose_logging(self, caplog):
        runner = ExampleRunner(TourConfig(verbose=True, show_headers=False))
        runner.register("probe", "Probe", lambda config: None)
        with caplog.at_level(logging.INFO, logger="guidedtour"):
            runner.run()
        assert any("Running page 1/1: probe" in r.getMessage() for r in caplog.records)

    def test_quiet_by_default(self):
        ExampleRunner()
        assert logging.getLogger("guidedtour").level == logging.WARNING


@pytest.mark.integration
class TestDefaultTour:
    """Run the real pages."""

    def test_default_pages(self):
        assert default_runner().page_names == ["enumerations", "classes", "protocols", "concurrency"]

    def test_enumerations_page(self, capsys):
        default_runner(TourConfig(show_headers=False)).run(["enumerations"])
        out = capsys.readouterr().out
        assert "Sunrise is at 6:00 am and sunset is at 8:09 pm." in out
        assert "Failure...  Out of cheese." in out
        assert "The 3 of spades" in out
        assert "A full deck has 52 cards" in out

    def test_classes_page(self, capsys):
        default_runner(TourConfig(show_headers=False)).run(["classes"])
        out = capsys.readouterr().out
        assert "A shape with 700 sides." in out
        assert "A square with sides of length 5.2." in out
        assert "Square side 10.0, triangle side 10.0" in out
        assert "Optional square side length: None" in out
        assert "Hello I'm Jonas! My id is 21312323" in out

    def test_protocols_page(self, capsys):
        default_runner(TourConfig(show_headers=False)).run(["protocols"])
        out = capsys.readouterr().out
        assert "The number 7" in out
        assert "After adjust: The number 49 (id 1)" in out

    def test_concurrency_page_waits_for_greeting(self, capsys):
        default_runner(TourConfig(show_headers=False)).run(["concurrency"])
        assert "Hello John Appleseed, user ID 97" in capsys.readouterr().out

    def test_concurrency_page_uses_configured_server(self, capsys):
        default_runner(TourConfig(show_headers=False, server="backup")).run(["concurrency"])
        assert "Hello Guest, user ID 501" in capsys.readouterr().out

    def test_full_tour(self, capsys):
        completed = default_runner().run()
        out = capsys.readouterr().out
        assert completed == ["enumerations", "classes", "protocols", "concurrency"]
        for title in ("Enumerations and Structures", "Objects and Classes",
                      "Protocols and Extensions", "Concurrency"):
            assert f"=== {title} ===" in out
