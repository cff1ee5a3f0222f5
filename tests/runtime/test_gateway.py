from __future__ import annotations

from typing import Any

import pytest

from lib_log_gateway.adapters import DeferredCapabilityHost, InMemoryBus, StaticCapabilityHost
from lib_log_gateway.application.use_cases import AcquisitionState
from lib_log_gateway.domain import Envelope, Severity
from lib_log_gateway.runtime import Gateway, NamedLogger, get_logger
from tests._fakes import RecordingConsole, RecordingProvider, control_message

Diagnostics = list[tuple[str, dict[str, Any]]]


def _messages(bus: InMemoryBus) -> list[str]:
    return [payload["msg"] for _, payload in bus.published]


def test_calls_before_bind_are_buffered_then_published(gateway: Gateway, bus: InMemoryBus) -> None:
    gateway.log("hello", 42)

    assert bus.published == []
    assert gateway.pending == 1

    assert gateway.on_message("control", control_message("c1", object())) is True

    assert bus.published == [
        ("c1", {"severity": "log", "source": None, "quiet": True, "request": "debug", "msg": '["hello",42]'}),
    ]
    assert gateway.pending == 0


def test_calls_after_bind_publish_immediately(gateway: Gateway, bus: InMemoryBus) -> None:
    gateway.on_message("control", control_message("c1"))
    gateway.info("ready")
    gateway.debug()

    assert _messages(bus) == ['["ready"]', "[]"]
    assert [payload["severity"] for _, payload in bus.published] == ["info", "debug"]


def test_replay_preserves_call_order_across_severities(gateway: Gateway, bus: InMemoryBus) -> None:
    gateway.warn("a")
    gateway.get_logger("svc").info("b")
    gateway.format("debug", "src", "[3]")
    gateway.log("d")

    gateway.on_message("control", control_message())

    assert _messages(bus) == ['["a"]', '["b"]', "[3]", '["d"]']
    assert [payload["source"] for _, payload in bus.published] == [None, "svc", "src", None]


def test_binding_is_idempotent(gateway: Gateway, bus: InMemoryBus, diagnostics: Diagnostics) -> None:
    first_console = object()
    gateway.on_message("control", control_message("c1", first_console))
    assert gateway.on_message("control", control_message("c2", object())) is False

    gateway.log("x")

    assert gateway.channel == "c1"
    assert gateway.console is first_console
    assert {channel for channel, _ in bus.published} == {"c1"}
    assert ("bind_ignored", {"reason": "already_bound", "source": "control"}) in diagnostics


def test_untrusted_or_malformed_control_messages_do_not_bind(gateway: Gateway, bus: InMemoryBus) -> None:
    gateway.log("held")

    assert gateway.on_message("plugin", control_message()) is False
    assert gateway.on_message("control", {"channel": "c1"}) is False
    assert gateway.on_message("control", None) is False

    assert gateway.bound is False
    assert bus.published == []
    assert gateway.pending == 1


def test_custom_trusted_source() -> None:
    gateway = Gateway(bus=InMemoryBus(), host=StaticCapabilityHost({}), trusted_source="hub")
    assert gateway.on_message("control", control_message()) is False
    assert gateway.on_message("hub", control_message()) is True


def test_string_payload_with_source_is_treated_as_preformatted(gateway: Gateway, bus: InMemoryBus) -> None:
    gateway.on_message("control", control_message())

    gateway.format("log", "src", "[1,2,3]")
    gateway.format(Severity.LOG, None, "[1,2,3]")

    assert _messages(bus) == ["[1,2,3]", '["[1,2,3]"]']


def test_unknown_severity_is_rejected(gateway: Gateway) -> None:
    with pytest.raises(ValueError, match="Unknown severity"):
        gateway.format("fatal", None, ["x"])


def test_error_reaches_console_target_before_bind() -> None:
    console = RecordingConsole()
    bus = InMemoryBus()
    gateway = Gateway(bus=bus, host=StaticCapabilityHost({}), console=console)

    gateway.error("boom")

    assert console.calls == [("error", ("boom",))]
    assert bus.published == []


def test_error_uses_bound_console_and_publishes(gateway: Gateway, bus: InMemoryBus) -> None:
    console = RecordingConsole()
    gateway.on_message("control", control_message("c1", console))

    gateway.error("boom", 1)

    assert console.calls == [("error", ("boom", 1))]
    assert bus.published[0][1]["severity"] == "error"
    assert bus.published[0][1]["msg"] == '["boom",1]'


def test_error_skips_nested_gateway_and_missing_console(gateway: Gateway, bus: InMemoryBus) -> None:
    inner = Gateway(bus=InMemoryBus(), host=StaticCapabilityHost({}))
    gateway.error("no console yet")
    gateway.on_message("control", control_message("c1", inner))

    gateway.error("nested")

    assert inner.pending == 0
    assert inner.bound is False
    assert len(bus.published) == 2


def test_error_mirror_failures_are_absorbed(gateway: Gateway, bus: InMemoryBus) -> None:
    class Exploding(RecordingConsole):
        def error(self, *args: Any) -> None:
            raise RuntimeError("console gone")

    gateway.on_message("control", control_message("c1", Exploding()))
    gateway.error("still published")

    assert _messages(bus) == ['["still published"]']


def test_print_routes_envelopes_to_provider(gateway: Gateway) -> None:
    gateway.print(Envelope.build(Severity.WARN, "disk", ["93%"]))
    gateway.print({"severity": "info", "source": None, "quiet": True, "request": "debug", "msg": '["ok"]'})

    (provider,) = RecordingProvider.instances
    assert provider.calls == [("warn", "disk", ["93%"]), ("info", None, ["ok"])]
    assert gateway.provider_state is AcquisitionState.READY


def test_print_suppressed_when_console_is_the_gateway(gateway: Gateway, diagnostics: Diagnostics) -> None:
    gateway.on_message("control", control_message("c1", gateway))

    gateway.print(Envelope.build(Severity.LOG, None, ["echo"]))

    (provider,) = RecordingProvider.instances
    assert provider.calls == []
    assert "print_suppressed" in [name for name, _ in diagnostics]


def test_prints_wait_for_provider_and_request_it_once() -> None:
    host = DeferredCapabilityHost()
    gateway = Gateway(bus=InMemoryBus(), host=host)

    gateway.print(Envelope.build(Severity.LOG, None, [1]))
    gateway.print(Envelope.build(Severity.ERROR, None, [2]))

    assert host.requested == ["core.logger"]
    assert gateway.provider_state is AcquisitionState.REQUESTING

    host.resolve("core.logger", RecordingProvider)

    (provider,) = RecordingProvider.instances
    assert provider.calls == [("log", None, [1]), ("error", None, [2])]


def test_provider_failure_drops_prints(diagnostics: Diagnostics) -> None:
    gateway = Gateway(
        bus=InMemoryBus(),
        host=StaticCapabilityHost({}),
        diagnostic=lambda name, payload: diagnostics.append((name, payload)),
    )

    gateway.print(Envelope.build(Severity.LOG, None, ["lost"]))
    gateway.print(Envelope.build(Severity.LOG, None, ["also lost"]))

    assert gateway.provider_state is AcquisitionState.FAILED
    assert [name for name, _ in diagnostics].count("print_dropped") == 2


def test_attach_feeds_bus_traffic_back_into_print(gateway: Gateway) -> None:
    gateway.attach()
    gateway.warn("before", "bind")

    gateway.on_message("control", control_message("c1"))
    gateway.get_logger("svc").error("after")

    (provider,) = RecordingProvider.instances
    assert provider.calls == [("warn", None, ["before", "bind"]), ("error", "svc", ["after"])]


def test_gateway_string_form() -> None:
    gateway = Gateway(bus=InMemoryBus(), host=StaticCapabilityHost({}))
    assert str(gateway) == "[Console]"


def test_diagnostic_hook_failures_do_not_break_logging(bus: InMemoryBus) -> None:
    def broken(name: str, payload: dict[str, Any]) -> None:
        raise RuntimeError("hook failed")

    gateway = Gateway(bus=bus, host=StaticCapabilityHost({}), diagnostic=broken)
    gateway.log("a")
    gateway.on_message("control", control_message())

    assert _messages(bus) == ['["a"]']


def test_named_loggers_tag_source(gateway: Gateway, bus: InMemoryBus) -> None:
    logger = get_logger(gateway, "worker")
    assert isinstance(logger, NamedLogger)
    assert logger.name == "worker"

    gateway.on_message("control", control_message())
    logger.log("a", 1)
    logger.info()
    logger.debug("c")
    logger.warn("d")
    logger.error("e")

    assert [(payload["severity"], payload["source"], payload["msg"]) for _, payload in bus.published] == [
        ("log", "worker", '["a",1]'),
        ("info", "worker", "[]"),
        ("debug", "worker", '["c"]'),
        ("warn", "worker", '["d"]'),
        ("error", "worker", '["e"]'),
    ]


def test_named_logger_error_does_not_mirror_to_console(gateway: Gateway) -> None:
    console = RecordingConsole()
    gateway.on_message("control", control_message("c1", console))

    gateway.get_logger("worker").error("quiet")

    assert console.calls == []


def test_unencodable_arguments_never_escape_log_calls(gateway: Gateway, bus: InMemoryBus) -> None:
    looped: list[Any] = []
    looped.append(looped)
    gateway.on_message("control", control_message())

    gateway.log({(1, 2): "x"})
    gateway.warn(looped)

    assert _messages(bus) == ['["{(1, 2): \'x\'}"]', '["[[...]]"]']


def test_unencodable_buffered_call_is_replayed_with_the_rest(gateway: Gateway, bus: InMemoryBus) -> None:
    gateway.log({(1, 2): "x"})
    gateway.log("after")

    gateway.on_message("control", control_message())

    assert len(bus.published) == 2
    assert _messages(bus)[1] == '["after"]'


def test_non_iterable_payload_formats_as_empty(gateway: Gateway, bus: InMemoryBus) -> None:
    gateway.on_message("control", control_message())

    gateway.format("info", None, 5)  # type: ignore[arg-type]

    assert _messages(bus) == ["[]"]


def test_attach_after_buffered_calls_still_delivers_them(gateway: Gateway) -> None:
    gateway.log("early")
    gateway.attach()

    gateway.on_message("control", control_message("c1"))
    gateway.log("late")

    (provider,) = RecordingProvider.instances
    assert [call[2] for call in provider.calls] == [["early"], ["late"]]


def test_attach_after_bind_subscribes_immediately(gateway: Gateway) -> None:
    gateway.on_message("control", control_message("c1"))
    gateway.attach()

    gateway.info("bound first")

    (provider,) = RecordingProvider.instances
    assert provider.calls == [("info", None, ["bound first"])]
