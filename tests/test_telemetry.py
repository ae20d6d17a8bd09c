"""Tests for telemetry helpers"""

from panetree.telemetry import Metrics, format_pane_log


def test_format_pane_log():
    assert format_pane_log("0", "1", "5", "split Right") == "w:0 t:1 p:5 : split Right"


class TestMetrics:
    def test_inc_and_get(self):
        m = Metrics()
        m.inc("equalize.resize")
        m.inc("equalize.resize", value=2)
        assert m.get_counter("equalize.resize") == 3
        assert m.get_counter("missing") == 0

    def test_labels(self):
        m = Metrics()
        m.inc("reconcile.created", {"tab": "1", "window": "0"})
        assert m.get_all_counters() == {"reconcile.created{tab=1,window=0}": 1}
        assert m.get_counter("reconcile.created", {"window": "0", "tab": "1"}) == 1

    def test_disabled(self):
        m = Metrics(enabled=False)
        m.inc("settle.timeout")
        assert m.get_all_counters() == {}

    def test_reset(self):
        m = Metrics()
        m.inc("x")
        m.reset()
        assert m.get_counter("x") == 0
