"""Tests for the shared ToolDispatcher: envelopes, coercion and error mapping."""

import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

import httpx
import pytest

from conftest import TEST_API_KEY, FakeGammaClient
from gamma_mcp.exceptions import RemoteAPIError, UnknownOperationError
from gamma_mcp.mcp_server.routing import ToolDispatcher
from gamma_mcp.mcp_server.tool_schemas import TOOL_CATALOG
from gamma_mcp.validation.models import GenerateInput, ListThemesInput

MINIMAL_ARGUMENTS = {
    "gamma_generate": {"inputText": "AI in healthcare", "textMode": "generate"},
    "gamma_create_from_template": {"gammaId": "g_123", "prompt": "Adapt for Q3"},
    "gamma_get_generation": {"generationId": "gen-1"},
    "gamma_list_themes": {},
    "gamma_list_folders": {},
}


def _text(result) -> str:
    assert len(result.content) == 1
    assert result.content[0].type == "text"
    return result.content[0].text


class TestSuccessEnvelope:
    """Every catalog operation succeeds with only its required fields"""

    def test_minimal_arguments_cover_catalog(self):
        assert set(MINIMAL_ARGUMENTS) == {op.name for op in TOOL_CATALOG}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("tool", sorted(MINIMAL_ARGUMENTS))
    async def test_required_fields_only(self, dispatcher, tool):
        result = await dispatcher.dispatch(tool, MINIMAL_ARGUMENTS[tool])

        assert result.isError is False
        json.loads(_text(result))

    @pytest.mark.asyncio
    async def test_success_text_is_pretty_printed_remote_json(self, dispatcher):
        result = await dispatcher.dispatch("gamma_get_generation", {"generationId": "gen-42"})

        text = _text(result)
        payload = json.loads(text)
        assert payload == {"generationId": "gen-42", "status": "pending"}
        assert text == json.dumps(payload, indent=2)

    @pytest.mark.asyncio
    async def test_list_themes_relays_listing(self, dispatcher):
        result = await dispatcher.dispatch("gamma_list_themes", {})

        payload = json.loads(_text(result))
        assert payload["data"][0]["id"] == "t1"
        assert payload["hasMore"] is False
        assert payload["nextCursor"] is None

    @pytest.mark.asyncio
    async def test_none_arguments_treated_as_empty(self, dispatcher):
        result = await dispatcher.dispatch("gamma_list_folders", None)
        assert result.isError is False


class TestArgumentCoercion:
    """Raw argument maps become typed operation models"""

    def test_generate_defaults_applied(self, dispatcher):
        payload = dispatcher.parse_arguments("gamma_generate", {"inputText": "x", "textMode": "generate"})

        assert isinstance(payload, GenerateInput)
        assert payload.format == "presentation"
        assert payload.num_cards == 10

    def test_undeclared_keys_ignored(self, dispatcher):
        payload = dispatcher.parse_arguments(
            "gamma_list_themes", {"after": "abc", "apiKey": "nope", "group": "x"}
        )

        assert isinstance(payload, ListThemesInput)
        assert payload.to_query_params() == {"after": "abc"}

    def test_unknown_tool_raises(self, dispatcher):
        with pytest.raises(UnknownOperationError):
            dispatcher.parse_arguments("gamma_list_generations", {})

    @pytest.mark.asyncio
    async def test_handler_receives_typed_model(self, dispatcher, fake_client):
        await dispatcher.dispatch("gamma_generate", {"inputText": "x", "textMode": "preserve", "numCards": 3})

        operation, payload = fake_client.calls[-1]
        assert operation == "generate"
        assert payload.num_cards == 3
        assert payload.text_mode == "preserve"

    @pytest.mark.asyncio
    async def test_get_generation_passes_id(self, dispatcher, fake_client):
        await dispatcher.dispatch("gamma_get_generation", {"generationId": "gen-77"})
        assert fake_client.calls[-1] == ("get_generation", "gen-77")


class TestLegacyArguments:
    """Deprecated flat generate arguments fold into textOptions"""

    @pytest.mark.asyncio
    async def test_flat_text_keys_fold_into_text_options(self, dispatcher, fake_client, log_stream):
        result = await dispatcher.dispatch(
            "gamma_generate",
            {
                "inputText": "x",
                "textMode": "generate",
                "textTone": "casual",
                "textAudience": "students",
                "textAmount": "short",
                "textLanguage": "de",
            },
        )

        assert result.isError is False
        payload = fake_client.calls[-1][1]
        assert payload.to_request_body()["textOptions"] == {
            "amount": "brief",
            "tone": "casual",
            "audience": "students",
            "language": "de",
        }
        assert "Deprecated flat arguments" in log_stream.getvalue()

    def test_long_maps_to_detailed_and_medium_kept(self, dispatcher):
        long_payload = dispatcher.parse_arguments(
            "gamma_generate", {"inputText": "x", "textMode": "generate", "textAmount": "long"}
        )
        medium_payload = dispatcher.parse_arguments(
            "gamma_generate", {"inputText": "x", "textMode": "generate", "textAmount": "medium"}
        )

        assert long_payload.text_options.amount == "detailed"
        assert medium_payload.text_options.amount == "medium"

    def test_explicit_text_options_win(self, dispatcher):
        payload = dispatcher.parse_arguments(
            "gamma_generate",
            {"inputText": "x", "textMode": "generate", "textTone": "casual", "textOptions": {"tone": "formal"}},
        )

        assert payload.text_options.tone == "formal"

    @pytest.mark.asyncio
    async def test_theme_name_dropped_with_warning(self, dispatcher, fake_client, log_stream):
        result = await dispatcher.dispatch(
            "gamma_generate", {"inputText": "x", "textMode": "generate", "themeName": "Oasis"}
        )

        assert result.isError is False
        body = fake_client.calls[-1][1].to_request_body()
        assert "themeName" not in body
        assert "themeId" not in body
        assert "themeName" in log_stream.getvalue()


class TestErrorEnvelopes:
    """Failures become isError envelopes; nothing propagates"""

    @pytest.mark.asyncio
    async def test_unknown_tool(self, dispatcher):
        result = await dispatcher.dispatch("gamma_list_generations", {})

        text = _text(result)
        assert result.isError is True
        assert text.startswith("Error [UNKNOWN_TOOL]:")
        assert "gamma_list_generations" in text
        for op in TOOL_CATALOG:
            assert op.name in text

    @pytest.mark.asyncio
    async def test_missing_required_field_named(self, dispatcher, fake_client):
        result = await dispatcher.dispatch("gamma_generate", {"inputText": "x"})

        text = _text(result)
        assert result.isError is True
        assert text.startswith("Error [INVALID_ARGUMENTS]:")
        assert "textMode" in text
        assert "MISSING REQUIRED FIELDS: textMode" in text
        assert "Details:" in text
        assert fake_client.calls == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "arguments, field",
        [
            ({"inputText": "x", "textMode": "shout"}, "textMode"),
            ({"inputText": "x", "textMode": "generate", "numCards": 0}, "numCards"),
            ({"inputText": "x", "textMode": "generate", "numCards": 76}, "numCards"),
            ({"inputText": "x", "textMode": "generate", "format": "poster"}, "format"),
            ({"inputText": "", "textMode": "generate"}, "inputText"),
            ({"inputText": "x", "textMode": "generate", "additionalInstructions": "y" * 2001}, "additionalInstructions"),
            ({"inputText": "x", "textMode": "generate", "textOptions": {"amount": "huge"}}, "textOptions.amount"),
        ],
    )
    async def test_invalid_values_name_the_field(self, dispatcher, arguments, field):
        result = await dispatcher.dispatch("gamma_generate", arguments)

        assert result.isError is True
        assert f"INVALID VALUES: {field}" in _text(result)

    @pytest.mark.asyncio
    async def test_list_limit_bounds(self, dispatcher):
        result = await dispatcher.dispatch("gamma_list_themes", {"limit": 51})

        assert result.isError is True
        assert "limit" in _text(result)

    @pytest.mark.asyncio
    async def test_non_object_arguments(self, dispatcher):
        result = await dispatcher.dispatch("gamma_list_themes", ["not", "a", "map"])

        assert result.isError is True
        assert "Error [INVALID_ARGUMENTS]" in _text(result)

    @pytest.mark.asyncio
    async def test_remote_error_includes_status_and_body(self, test_logger):
        client = FakeGammaClient(
            error=RemoteAPIError(
                'Gamma API error (401): {"message":"invalid key"}',
                status_code=401,
                body='{"message":"invalid key"}',
            )
        )
        dispatcher = ToolDispatcher(client, logger=test_logger)

        result = await dispatcher.dispatch("gamma_get_generation", {"generationId": "gen-1"})

        text = _text(result)
        assert result.isError is True
        assert text.startswith("Error [REMOTE_API_ERROR]:")
        assert "401" in text
        assert '{"message":"invalid key"}' in text
        assert "GAMMA_API_KEY" in text
        assert "Details:" in text
        assert "\"status_code\": 401" in text

    @pytest.mark.asyncio
    async def test_rate_limit_recovery_hint(self, test_logger):
        client = FakeGammaClient(error=RemoteAPIError("Gamma API error (429): slow down", status_code=429))
        dispatcher = ToolDispatcher(client, logger=test_logger)

        result = await dispatcher.dispatch("gamma_list_folders", {})

        assert "RATE LIMITED" in _text(result)

    @pytest.mark.asyncio
    async def test_unexpected_exception_contained(self, test_logger, log_stream):
        dispatcher = ToolDispatcher(FakeGammaClient(error=RuntimeError("boom")), logger=test_logger)

        result = await dispatcher.dispatch("gamma_list_themes", {})

        text = _text(result)
        assert result.isError is True
        assert text.startswith("Error [UNEXPECTED_ERROR]:")
        assert "boom" in text
        assert "Unexpected error" in log_stream.getvalue()

    @pytest.mark.asyncio
    async def test_end_to_end_401_never_leaks_api_key(self, make_client):
        client, _ = make_client(
            httpx.Response(401, text=f'{{"message":"invalid key {TEST_API_KEY}"}}')
        )
        dispatcher = ToolDispatcher(client)

        result = await dispatcher.dispatch("gamma_generate", {"inputText": "x", "textMode": "generate"})

        text = _text(result)
        assert result.isError is True
        assert "401" in text
        assert "invalid key" in text
        assert TEST_API_KEY not in text


class TestLogging:
    """Dispatch is logged with argument keys only"""

    @pytest.mark.asyncio
    async def test_values_never_logged(self, dispatcher, log_stream):
        await dispatcher.dispatch(
            "gamma_generate", {"inputText": "confidential merger plan", "textMode": "generate"}
        )

        output = log_stream.getvalue()
        assert "Tool invocation started" in output
        assert "Tool completed successfully" in output
        assert "inputText" in output
        assert "confidential merger plan" not in output


class TestVerbatimRelay:
    """Remote snapshots reach the caller unmodified"""

    @pytest.mark.asyncio
    async def test_failed_generation_relayed_as_success(self, make_client):
        snapshot = {"status": "failed", "error": {"message": "Out of credits", "statusCode": 402}}
        client, _ = make_client(httpx.Response(200, json=snapshot))
        dispatcher = ToolDispatcher(client)

        result = await dispatcher.dispatch("gamma_get_generation", {"generationId": "g1"})

        assert result.isError is False
        assert json.loads(_text(result)) == snapshot

    @pytest.mark.asyncio
    async def test_listing_values_not_coerced(self, make_client):
        listing = {"data": [{"id": "f1", "name": "Decks"}], "hasMore": "true", "nextCursor": 7}
        client, _ = make_client(httpx.Response(200, json=listing))
        dispatcher = ToolDispatcher(client)

        result = await dispatcher.dispatch("gamma_list_folders", {})

        assert json.loads(_text(result)) == listing
