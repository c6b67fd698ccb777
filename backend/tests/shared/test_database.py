"""Tests for shared/database.py."""

import pytest
from unittest.mock import patch, AsyncMock, MagicMock

from shared.database import (
    init_supabase_client,
    get_supabase_client,
    reset_client_cache,
)


class TestSupabaseClient:
    def setup_method(self):
        """Reset cache before each test."""
        reset_client_cache()

    def teardown_method(self):
        reset_client_cache()

    @pytest.mark.asyncio
    @patch("shared.database.acreate_client", new_callable=AsyncMock)
    @patch("shared.database.get_settings")
    async def test_init_creates_client(self, mock_settings, mock_create):
        """Should create client with service role key."""
        mock_settings.return_value.supabase_url = "https://test.supabase.co"
        mock_settings.return_value.supabase_service_role_key = "test-key"
        mock_create.return_value = MagicMock()

        client = await init_supabase_client()

        mock_create.assert_awaited_once_with(
            "https://test.supabase.co",
            "test-key",
        )
        assert get_supabase_client() is client

    @pytest.mark.asyncio
    @patch("shared.database.acreate_client", new_callable=AsyncMock)
    @patch("shared.database.get_settings")
    async def test_init_caches_client(self, mock_settings, mock_create):
        """Should cache the client and not recreate it."""
        mock_settings.return_value.supabase_url = "https://test.supabase.co"
        mock_settings.return_value.supabase_service_role_key = "test-key"
        mock_create.return_value = MagicMock()

        client1 = await init_supabase_client()
        client2 = await init_supabase_client()

        mock_create.assert_awaited_once()
        assert client1 is client2

    @pytest.mark.asyncio
    @pytest.mark.parametrize("url,key", [
        ("", ""),
        ("", "test-key"),
        ("https://test.supabase.co", ""),
    ])
    @patch("shared.database.get_settings")
    async def test_init_raises_without_config(self, mock_settings, url, key):
        """Should raise if configuration is missing."""
        mock_settings.return_value.supabase_url = url
        mock_settings.return_value.supabase_service_role_key = key

        with pytest.raises(RuntimeError, match="configuration missing"):
            await init_supabase_client()

    def test_get_before_init_raises(self):
        with pytest.raises(RuntimeError, match="not initialized"):
            get_supabase_client()
