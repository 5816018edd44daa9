"""Tests for adapter construction and command dispatch."""

import pytest

from cachex_collections import Hash, List, Set
from cachex_collections.base import Base
from cachex_collections.codecs import IdentityCodec, JSONCodec
from cachex_collections.exceptions import InvalidClientError, InvalidKeyError, NotSupportedError
from cachex_collections.types import HashCommand, ListCommand, SetCommand


class TestConstruction:
    def test_defaults(self, mock_client):
        adapter = Base(mock_client, "things")
        assert adapter.client is mock_client
        assert adapter.key == "things"
        assert adapter.use_json is False
        assert isinstance(adapter.codec, IdentityCodec)

    def test_use_json_selects_json_codec(self, mock_client):
        adapter = List(mock_client, "things", use_json=True)
        assert adapter.use_json is True
        assert isinstance(adapter.codec, JSONCodec)

    def test_codec_override(self, mock_client):
        adapter = Hash(mock_client, "things", codec="cachex_collections.codecs.json.JSONCodec")
        assert isinstance(adapter.codec, JSONCodec)

    def test_bytes_key(self, mock_client):
        assert List(mock_client, b"things").key == b"things"

    @pytest.mark.parametrize("adapter_class", [List, Hash, Set])
    def test_shared_constructor_signature(self, mock_client, adapter_class):
        adapter = adapter_class(mock_client, "things", False)
        assert adapter.key == "things"
        assert adapter.use_json is False

    @pytest.mark.asyncio
    async def test_set_never_encodes_members(self, mock_client):
        mock_client.sadd.return_value = 1
        tags = Set(mock_client, "tags", True)

        assert tags.use_json is True
        await tags.add("python")
        mock_client.sadd.assert_awaited_once_with("tags", "python")

    @pytest.mark.parametrize("bad_client", [None, object(), "redis://localhost"])
    def test_invalid_client(self, bad_client):
        with pytest.raises(InvalidClientError, match="Expected a Redis/Valkey client"):
            List(bad_client, "things")

    def test_invalid_client_is_type_error(self):
        with pytest.raises(TypeError):
            Hash(None, "things")

    @pytest.mark.parametrize("key", ["", b"", None, 42])
    def test_invalid_key(self, mock_client, key):
        with pytest.raises(InvalidKeyError, match="non-empty string"):
            Set(mock_client, key)

    def test_state_is_read_only(self, mock_client):
        adapter = List(mock_client, "things")
        with pytest.raises(AttributeError):
            adapter.key = "other"
        with pytest.raises(AttributeError):
            adapter.use_json = True

    def test_repr(self, mock_client):
        assert repr(List(mock_client, "things", use_json=True)) == "<List key='things' codec=JSONCodec()>"


class TestDispatch:
    @pytest.mark.asyncio
    async def test_binds_key_first(self, mock_client):
        mock_client.lrange.return_value = ["a"]
        adapter = List(mock_client, "things")

        result = await adapter.dispatch(ListCommand.LRANGE)(0, -1)

        assert result == ["a"]
        mock_client.lrange.assert_awaited_once_with("things", 0, -1)

    @pytest.mark.asyncio
    async def test_passes_keyword_arguments(self, mock_client):
        adapter = Hash(mock_client, "things")
        await adapter.dispatch(HashCommand.HSET)(mapping={"a": "1"})
        mock_client.hset.assert_awaited_once_with("things", mapping={"a": "1"})

    def test_plain_string_command(self, mock_client):
        adapter = List(mock_client, "things")
        assert adapter.dispatch("llen") is not None

    @pytest.mark.asyncio
    async def test_command_name_is_case_insensitive(self, mock_client):
        mock_client.lrange.return_value = ["a"]
        adapter = List(mock_client, "things")

        assert await adapter.dispatch("LRANGE")(0, -1) == ["a"]
        mock_client.lrange.assert_awaited_once_with("things", 0, -1)

    @pytest.mark.parametrize(
        ("adapter_class", "command"),
        [
            (List, HashCommand.HGET),
            (Hash, SetCommand.SADD),
            (Set, ListCommand.LPUSH),
        ],
    )
    def test_rejects_foreign_commands(self, mock_client, adapter_class, command):
        adapter = adapter_class(mock_client, "things")
        with pytest.raises(NotSupportedError, match=f"Command '{command}' is not supported by {adapter_class.__name__}"):
            adapter.dispatch(command)

    def test_rejects_unknown_command(self, mock_client):
        with pytest.raises(NotSupportedError) as exc_info:
            List(mock_client, "things").dispatch("flushall")
        assert exc_info.value.command == "flushall"
        assert exc_info.value.adapter == "List"

    @pytest.mark.asyncio
    async def test_propagates_client_errors(self, mock_client):
        mock_client.llen.side_effect = ConnectionError("down")
        adapter = List(mock_client, "things")
        with pytest.raises(ConnectionError, match="down"):
            await adapter.length()


class TestKeyOperations:
    @pytest.mark.asyncio
    async def test_remove_key(self, mock_client):
        mock_client.delete.return_value = 1
        assert await Hash(mock_client, "things").remove_key() == 1
        mock_client.delete.assert_awaited_once_with("things")

    @pytest.mark.asyncio
    async def test_remove_missing_key(self, mock_client):
        mock_client.delete.return_value = 0
        assert await Set(mock_client, "things").remove_key() == 0

    @pytest.mark.asyncio
    async def test_exists_is_strict_bool(self, mock_client):
        mock_client.exists.return_value = 1
        assert await List(mock_client, "things").exists() is True
        mock_client.exists.return_value = 0
        assert await List(mock_client, "things").exists() is False
