"""Unit tests for the project config oracle."""
from __future__ import annotations

import asyncio

from ingress_edge.application.projects import ProjectConfigOracle
from ingress_edge.kernel.errors import ConfigNotFoundError, SerializationError, StoreUnavailableError
from ingress_edge.kernel.ingress import ProjectConfig
from ingress_edge.testing.fakes import FakeErrorReporter, InMemoryKeyValueStore


class TestProjectConfigOracle:
    def test_returns_config(self) -> None:
        async def run() -> None:
            store = InMemoryKeyValueStore()
            store.set("p1.config", '{"origins": ["https://a.test"], "dailyLimit": 2}')
            reporter = FakeErrorReporter()
            config = await ProjectConfigOracle(store, reporter).lookup("p1")
            assert config == ProjectConfig(origins=("https://a.test",), daily_limit=2)
            assert reporter.reports == []
        asyncio.run(run())

    def test_missing_key_returns_none_and_reports(self) -> None:
        async def run() -> None:
            reporter = FakeErrorReporter()
            assert await ProjectConfigOracle(InMemoryKeyValueStore(), reporter).lookup("p2") is None
            [(error, tags)] = reporter.reports
            assert isinstance(error, ConfigNotFoundError)
            assert tags == {"projectID": "p2", "configKey": "p2.config"}
        asyncio.run(run())

    def test_empty_value_is_missing(self) -> None:
        async def run() -> None:
            store = InMemoryKeyValueStore()
            store.set("p1.config", "")
            reporter = FakeErrorReporter()
            assert await ProjectConfigOracle(store, reporter).lookup("p1") is None
            assert isinstance(reporter.errors[0], ConfigNotFoundError)
        asyncio.run(run())

    def test_malformed_document_returns_none(self) -> None:
        async def run() -> None:
            store = InMemoryKeyValueStore()
            store.set("p1.config", "{not json")
            reporter = FakeErrorReporter()
            assert await ProjectConfigOracle(store, reporter).lookup("p1") is None
            assert isinstance(reporter.errors[0], SerializationError)
        asyncio.run(run())

    def test_store_failure_returns_none(self) -> None:
        async def run() -> None:
            store = InMemoryKeyValueStore()
            store.available = False
            reporter = FakeErrorReporter()
            assert await ProjectConfigOracle(store, reporter).lookup("p1") is None
            assert isinstance(reporter.errors[0], StoreUnavailableError)
        asyncio.run(run())
