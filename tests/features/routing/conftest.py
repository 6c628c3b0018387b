"""BDD step definitions for routing features."""

import io
import time
from dataclasses import dataclass, field

import pytest
from pytest_bdd import given, parsers, then, when

from tierlog.adapters.console import ansi_color
from tierlog.adapters.memory import RecordingHandler
from tierlog.core.levels import parse_level
from tierlog.core.logger import Logger
from tierlog.core.models import Attr, Record
from tierlog.core.router import LevelRouter
from tierlog.factory import ERROR_COLOR, new_logger


@dataclass
class RoutingScenarioContext:
    """State shared between the steps of one scenario."""

    low: RecordingHandler = field(default_factory=RecordingHandler)
    high: RecordingHandler = field(default_factory=RecordingHandler)
    stream: io.StringIO = field(default_factory=io.StringIO)
    console: Logger | None = None
    lines: dict[int, str] = field(default_factory=dict)

    @property
    def logger(self) -> Logger:
        return Logger(LevelRouter(self.low, self.high))


def _levels(text: str) -> list[int]:
    return [parse_level(part) for part in text.split(",")]


@pytest.fixture
def ctx() -> RoutingScenarioContext:
    """Fresh scenario context for each test."""
    return RoutingScenarioContext()


# === Given ===
@given("a router over two recording handlers")
def given_router(ctx: RoutingScenarioContext) -> None:
    ctx.low = RecordingHandler()
    ctx.high = RecordingHandler()


@given(parsers.parse("a router over two recording handlers with minimum level {level}"))
def given_router_with_minimum(ctx: RoutingScenarioContext, level: str) -> None:
    ctx.low = RecordingHandler(level=parse_level(level))
    ctx.high = RecordingHandler(level=parse_level(level))


@given("a console logger")
def given_console_logger(ctx: RoutingScenarioContext) -> None:
    ctx.console = new_logger(stream=ctx.stream)


# === When ===
@when(parsers.parse("records are handled at {levels}"))
def when_records_handled(ctx: RoutingScenarioContext, levels: str) -> None:
    """Send one record per level straight to the router."""
    router = ctx.logger.handler
    for level in _levels(levels):
        router.handle(Record(timestamp=time.time(), level=level, message="test message"))


@when(parsers.parse("a logger logs at {levels}"))
def when_logger_logs(ctx: RoutingScenarioContext, levels: str) -> None:
    for level in _levels(levels):
        ctx.logger.log(level, "test message", k="v")


@when(parsers.parse("a logger with attribute {key}={value} logs at {levels}"))
def when_derived_logger_logs(ctx: RoutingScenarioContext, key: str, value: str, levels: str) -> None:
    derived = ctx.logger.with_attrs(**{key: value})
    for level in _levels(levels):
        derived.log(level, "test message")


@when(parsers.parse('the console logger logs "{message}" at {level} with {key}={value}'))
def when_console_logs(
    ctx: RoutingScenarioContext, message: str, level: str, key: str, value: str
) -> None:
    assert ctx.console is not None
    before = len(ctx.stream.getvalue())
    ctx.console.log(parse_level(level), message, **{key: value})
    ctx.lines[parse_level(level)] = ctx.stream.getvalue()[before:]


# === Then ===
@then(parsers.parse("the low handler received {levels}"))
def then_low_received(ctx: RoutingScenarioContext, levels: str) -> None:
    assert [r.level for r in ctx.low.records] == _levels(levels)


@then(parsers.parse("the high handler received {levels}"))
def then_high_received(ctx: RoutingScenarioContext, levels: str) -> None:
    assert [r.level for r in ctx.high.records] == _levels(levels)


@then(parsers.parse("every {tier} handler record carries {key}={value}"))
def then_every_record_carries(ctx: RoutingScenarioContext, tier: str, key: str, value: str) -> None:
    handler = ctx.low if tier == "low" else ctx.high
    assert handler.records
    assert all(Attr(key, value) in r.attrs for r in handler.records)


@then("the last low handler record carries only its own attributes")
def then_last_low_plain(ctx: RoutingScenarioContext) -> None:
    assert ctx.low.records[-1].attrs == (Attr("k", "v"),)


@then(parsers.parse("the {level} line shows {value} in red"))
def then_line_red(ctx: RoutingScenarioContext, level: str, value: str) -> None:
    assert f"{ansi_color(ERROR_COLOR)}{value}" in ctx.lines[parse_level(level)]


@then(parsers.parse("the {level} line shows {value} without color"))
def then_line_plain(ctx: RoutingScenarioContext, level: str, value: str) -> None:
    line = ctx.lines[parse_level(level)]
    assert value in line
    assert f"{ansi_color(ERROR_COLOR)}{value}" not in line
