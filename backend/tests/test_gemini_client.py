"""Tests for the Gemini client wrapper (no network)."""

import asyncio
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from services import gemini_client


def _fake_client(text: str | None = None, side_effect=None) -> MagicMock:
    client = MagicMock()
    client.aio.models.generate_content = AsyncMock(
        return_value=MagicMock(text=text), side_effect=side_effect
    )
    return client


def test_no_api_key_disables_client():
    assert gemini_client.get_client() is None


@pytest.mark.asyncio
async def test_generate_json_without_client_returns_none():
    assert await gemini_client.generate_json("prompt") is None


@pytest.mark.asyncio
@patch("services.gemini_client.get_client")
async def test_parses_plain_json(mock_get_client):
    mock_get_client.return_value = _fake_client('{"recommendations": []}')
    assert await gemini_client.generate_json("prompt") == {"recommendations": []}


@pytest.mark.asyncio
@patch("services.gemini_client.get_client")
async def test_strips_code_fences(mock_get_client):
    mock_get_client.return_value = _fake_client('```json\n{"a": 1}\n```')
    assert await gemini_client.generate_json("prompt") == {"a": 1}


@pytest.mark.asyncio
@patch("services.gemini_client.get_client")
async def test_invalid_json_returns_none(mock_get_client):
    mock_get_client.return_value = _fake_client("Sorry, I cannot help with that.")
    assert await gemini_client.generate_json("prompt") is None


@pytest.mark.asyncio
@patch("services.gemini_client.get_client")
async def test_non_object_json_returns_none(mock_get_client):
    mock_get_client.return_value = _fake_client("[1, 2, 3]")
    assert await gemini_client.generate_json("prompt") is None


@pytest.mark.asyncio
@patch("services.gemini_client.get_client")
async def test_empty_text_returns_none(mock_get_client):
    mock_get_client.return_value = _fake_client(None)
    assert await gemini_client.generate_json("prompt") is None


@pytest.mark.asyncio
@patch("services.gemini_client.get_client")
async def test_api_error_returns_none(mock_get_client):
    mock_get_client.return_value = _fake_client(side_effect=RuntimeError("quota exceeded"))
    assert await gemini_client.generate_json("prompt") is None


@pytest.mark.asyncio
@patch("services.gemini_client.get_client")
async def test_timeout_returns_none(mock_get_client):
    mock_get_client.return_value = _fake_client(side_effect=asyncio.TimeoutError())
    assert await gemini_client.generate_json("prompt") is None
