"""Testes do escopo de correlation_id."""

from __future__ import annotations

import asyncio

import pytest

from app.observability import accept_correlation_id, correlation_scope, get_correlation_id


class TestAcceptCorrelationId:
    """Testes de accept_correlation_id."""

    def test_keeps_well_formed_id(self) -> None:
        assert accept_correlation_id("req-42.a:b_c") == "req-42.a:b_c"

    @pytest.mark.parametrize("incoming", [None, "", "a b", "x\r\ninjected", "z" * 129])
    def test_generates_new_id_for_unsafe_values(self, incoming: str | None) -> None:
        generated = accept_correlation_id(incoming)
        assert generated != incoming
        assert len(generated) == 32


class TestCorrelationScope:
    """Testes de correlation_scope."""

    def test_sets_and_restores(self) -> None:
        assert get_correlation_id() == ""
        with correlation_scope("outer") as outer:
            assert outer == "outer"
            with correlation_scope("inner"):
                assert get_correlation_id() == "inner"
            assert get_correlation_id() == "outer"
        assert get_correlation_id() == ""

    def test_restores_on_error(self) -> None:
        with pytest.raises(RuntimeError), correlation_scope("req-1"):
            raise RuntimeError("boom")
        assert get_correlation_id() == ""

    @pytest.mark.asyncio
    async def test_isolated_between_tasks(self) -> None:
        async def handle(request_id: str) -> str:
            with correlation_scope(request_id):
                await asyncio.sleep(0)
                return get_correlation_id()

        results = await asyncio.gather(handle("a"), handle("b"))

        assert results == ["a", "b"]
