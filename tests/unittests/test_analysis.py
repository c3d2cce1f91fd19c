"""ABOUTME: Tests for the end-to-end analysis of one Pokemon.
ABOUTME: Verifies input normalization, report assembly, and error propagation."""

import asyncio
from collections.abc import Callable
from fractions import Fraction

import httpx
import pytest

from typeanalyzer import analysis
from typeanalyzer.analysis import TypeAnalysis, analyze_creature, normalize_query, run_analysis
from typeanalyzer.exceptions import CreatureNotFoundError, RelationDataUnavailableError


async def _analyze(client: httpx.AsyncClient, query: str, base_url: str) -> TypeAnalysis:
    async with client:
        return await analyze_creature(query, client=client, base_url=base_url)


class TestNormalizeQuery:
    """Tests for normalize_query function."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("pikachu", "pikachu"),
            ("  Charizard  ", "charizard"),
            ("MR-MIME\n", "mr-mime"),
            ("", None),
            ("   \t", None),
            (None, None),
        ],
    )
    def test_normalize(self, text: str | None, expected: str | None) -> None:
        """Input is trimmed and lower-cased, blank input is None."""
        assert normalize_query(text) == expected


class TestAnalyzeCreature:
    """Tests for analyze_creature function."""

    def test_charizard(self, mock_api: Callable[..., httpx.AsyncClient], api_base_url: str) -> None:
        """Fire/flying analysis matches the type chart."""
        result = asyncio.run(_analyze(mock_api(), " Charizard ", api_base_url))

        assert result.name == "charizard"
        assert result.sprite == "https://img.test/charizard.png"
        assert result.types == ["fire", "flying"]
        assert result.report.weaknesses[0] == ("rock", 4)
        assert result.report.resistances[0] == ("ground", 0)
        assert ("grass", Fraction(1, 4)) in result.report.resistances

    def test_single_type(self, mock_api: Callable[..., httpx.AsyncClient], api_base_url: str) -> None:
        """Monotype analysis uses that type's relations directly."""
        result = asyncio.run(_analyze(mock_api(), "pikachu", api_base_url))

        assert result.types == ["electric"]
        assert result.report.weaknesses == (("ground", 2),)
        assert [name for name, _ in result.report.resistances] == ["electric", "flying", "steel"]

    def test_fetches_each_type_once(self, mock_api: Callable[..., httpx.AsyncClient], api_base_url: str) -> None:
        """One pokemon request plus one request per type."""
        client = mock_api()

        asyncio.run(_analyze(client, "charizard", api_base_url))

        assert sorted(client.requested) == [  # type: ignore[attr-defined]
            "/api/v2/pokemon/charizard",
            "/api/v2/type/fire/",
            "/api/v2/type/flying/",
        ]

    def test_empty_query(self, mock_api: Callable[..., httpx.AsyncClient], api_base_url: str) -> None:
        """Blank input raises ValueError without any request."""
        client = mock_api()

        with pytest.raises(ValueError, match="empty"):
            asyncio.run(_analyze(client, "   ", api_base_url))

        assert client.requested == []  # type: ignore[attr-defined]

    def test_not_found(self, mock_api: Callable[..., httpx.AsyncClient], api_base_url: str) -> None:
        """Unknown Pokemon raise CreatureNotFoundError."""
        with pytest.raises(CreatureNotFoundError):
            asyncio.run(_analyze(mock_api(), "pikachoo", api_base_url))

    def test_type_lookup_failure(self, mock_api: Callable[..., httpx.AsyncClient], api_base_url: str) -> None:
        """A failed type lookup produces no report."""
        with pytest.raises(RelationDataUnavailableError):
            asyncio.run(_analyze(mock_api(fail_types=("flying",)), "charizard", api_base_url))

    def test_control_character_in_query(self, mock_api: Callable[..., httpx.AsyncClient], api_base_url: str) -> None:
        """Whitespace inside the name survives trimming and fails as not found."""
        with pytest.raises(CreatureNotFoundError, match="Check the spelling"):
            asyncio.run(_analyze(mock_api(), "mr\tmime", api_base_url))

    def test_unknown_type_resource(self, mock_api: Callable[..., httpx.AsyncClient], api_base_url: str) -> None:
        """A type the API can't resolve is a relation failure, not a not-found."""
        with pytest.raises(RelationDataUnavailableError, match="bird"):
            asyncio.run(_analyze(mock_api(), "missingno", api_base_url))


class TestRunAnalysis:
    """Tests for the synchronous run_analysis wrapper."""

    def test_creates_and_closes_client(
        self,
        mock_api: Callable[..., httpx.AsyncClient],
        api_base_url: str,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Without a client, one is created and closed afterwards."""
        client = mock_api()
        monkeypatch.setattr(analysis, "create_client", lambda: client)

        result = run_analysis("pikachu", base_url=api_base_url)

        assert result.name == "pikachu"
        assert client.is_closed

    def test_closes_client_on_error(
        self,
        mock_api: Callable[..., httpx.AsyncClient],
        api_base_url: str,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """The client is closed even when the lookup fails."""
        client = mock_api()
        monkeypatch.setattr(analysis, "create_client", lambda: client)

        with pytest.raises(CreatureNotFoundError):
            run_analysis("pikachoo", base_url=api_base_url)

        assert client.is_closed
