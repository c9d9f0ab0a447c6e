from __future__ import annotations

from mock_runtime.metrics import MetricsCollector


def test_metrics_render_prometheus() -> None:
    collector = MetricsCollector()
    collector.inc("mockhttp_requests_total", "ok")
    collector.inc("mockhttp_requests_total", "bad_url", n=2)
    collector.observe_latency("GET http://x/books", 1000)
    collector.observe_latency("GET http://x/slow", 9000)

    text = collector.render_prometheus()
    assert 'mockhttp_requests_total{outcome="bad_url"} 2' in text
    assert 'mockhttp_requests_total{outcome="ok"} 1' in text
    assert 'endpoint="GET http://x/books",le="1000"' in text
    assert 'endpoint="GET http://x/slow",le="+Inf"' in text
    assert collector.latency_series() == 2


def test_sub_millisecond_latency_lands_in_first_bucket() -> None:
    collector = MetricsCollector()
    collector.observe_latency("unmatched", 0.2)
    assert 'le="1"' in collector.render_prometheus()


def test_label_values_are_escaped() -> None:
    collector = MetricsCollector()
    collector.observe_latency('GET http://x/a?q="b"\\c', 5)
    text = collector.render_prometheus()
    assert 'endpoint="GET http://x/a?q=\\"b\\"\\\\c",le="10"' in text
