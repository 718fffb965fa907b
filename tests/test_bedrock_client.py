"""
Unit tests for the Bedrock client: request body shape, response decoding,
error mapping.
"""
import io
import json
from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError, EndpointConnectionError

from core.bedrock_client import (
    BedrockClient,
    ModelInvocationError,
    ModelParams,
    ModelResponse,
    ResponseParseError,
    build_request_body,
    default_claude_params,
    parse_response_body,
)
from tests.conftest import bedrock_body, sent_body


class TestDefaultParams:

    def test_claude_defaults(self, monkeypatch):
        monkeypatch.setenv("MODEL_ID", "anthropic.claude-v2:1")
        params = default_claude_params()

        assert params == ModelParams(
            model_id="anthropic.claude-v2:1",
            temperature=0.7,
            top_p=1.0,
            top_k=500,
            max_tokens=500,
        )

    def test_model_id_empty_without_env(self):
        assert default_claude_params().model_id == ""


class TestBuildRequestBody:

    def test_body_has_exactly_the_claude_fields(self):
        params = ModelParams(model_id="m", temperature=0.3, top_p=0.9, top_k=250, max_tokens=800)
        body = build_request_body("\n\nHuman: hi\n\nAssistant:", params)

        assert body == {
            "prompt": "\n\nHuman: hi\n\nAssistant:",
            "temperature": 0.3,
            "top_p": 0.9,
            "top_k": 250,
            "max_tokens_to_sample": 800,
        }

    def test_model_id_not_in_body(self):
        body = build_request_body("p", ModelParams(model_id="anthropic.claude-v2:1"))
        assert "model_id" not in body
        assert "max_tokens" not in body


class TestParseResponseBody:

    def test_decodes_all_fields(self):
        raw = json.dumps({
            "type": "completion",
            "completion": " Tokyo.",
            "stop_reason": "stop_sequence",
            "stop": "\n\nHuman:",
        }).encode()

        assert parse_response_body(raw) == ModelResponse(
            completion=" Tokyo.", stop_reason="stop_sequence", type="completion", stop="\n\nHuman:"
        )

    def test_missing_and_null_fields_become_empty(self):
        resp = parse_response_body(b'{"completion": "x", "stop": null}')
        assert resp.completion == "x"
        assert resp.stop_reason == ""
        assert resp.stop == ""

    def test_malformed_json_raises(self):
        with pytest.raises(ResponseParseError) as exc_info:
            parse_response_body(b"{not json")
        assert "failed to parse response" in str(exc_info.value)

    def test_non_object_raises(self):
        with pytest.raises(ResponseParseError):
            parse_response_body(b'["completion"]')


class TestInvokeModel:

    def test_sends_json_body_and_headers(self, runtime):
        client = BedrockClient(region="us-east-1", client=runtime)
        params = ModelParams(model_id="anthropic.claude-v2:1", temperature=0.4, max_tokens=1000)

        resp = client.invoke_model("\n\nHuman: 2+2?\n\nAssistant:", params)

        assert resp.completion == "Hello there."
        assert resp.stop_reason == "stop_sequence"

        kwargs = runtime.invoke_model.call_args.kwargs
        assert kwargs["modelId"] == "anthropic.claude-v2:1"
        assert kwargs["contentType"] == "application/json"
        assert kwargs["accept"] == "application/json"
        assert sent_body(runtime) == {
            "prompt": "\n\nHuman: 2+2?\n\nAssistant:",
            "temperature": 0.4,
            "top_p": 1.0,
            "top_k": 500,
            "max_tokens_to_sample": 1000,
        }

    def test_empty_model_id_rejected_before_call(self, runtime):
        client = BedrockClient(region="us-east-1", client=runtime)

        with pytest.raises(ValueError):
            client.invoke_model("p", ModelParams(model_id=""))
        runtime.invoke_model.assert_not_called()

    def test_client_error_wrapped(self):
        runtime = MagicMock()
        runtime.invoke_model.side_effect = ClientError(
            {"Error": {"Code": "AccessDeniedException", "Message": "no access"}}, "InvokeModel"
        )
        client = BedrockClient(region="us-east-1", client=runtime)

        with pytest.raises(ModelInvocationError) as exc_info:
            client.invoke_model("p", ModelParams(model_id="m"))

        assert "failed to invoke model" in str(exc_info.value)
        assert "AccessDeniedException" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, ClientError)

    def test_transport_error_wrapped(self):
        runtime = MagicMock()
        runtime.invoke_model.side_effect = EndpointConnectionError(endpoint_url="https://bedrock")
        client = BedrockClient(region="us-east-1", client=runtime)

        with pytest.raises(ModelInvocationError):
            client.invoke_model("p", ModelParams(model_id="m"))

    def test_bad_body_raises_parse_error(self):
        runtime = MagicMock()
        runtime.invoke_model.return_value = {"body": io.BytesIO(b"<html>oops</html>")}
        client = BedrockClient(region="us-east-1", client=runtime)

        with pytest.raises(ResponseParseError):
            client.invoke_model("p", ModelParams(model_id="m"))

    def test_region_from_environment(self, monkeypatch, runtime):
        monkeypatch.setenv("AWS_REGION", "eu-central-1")
        assert BedrockClient(client=runtime).region == "eu-central-1"

    def test_builds_boto3_client_when_none_given(self, monkeypatch):
        created = {}

        def fake_client(service, region_name=None):
            created["service"] = service
            created["region"] = region_name
            return MagicMock()

        monkeypatch.setattr("core.bedrock_client.boto3.client", fake_client)
        BedrockClient(region="us-west-2")

        assert created == {"service": "bedrock-runtime", "region": "us-west-2"}

    def test_stop_reason_max_tokens(self):
        runtime = MagicMock()
        runtime.invoke_model.return_value = bedrock_body(completion="cut", stop_reason="max_tokens")
        client = BedrockClient(region="us-east-1", client=runtime)

        assert client.invoke_model("p", ModelParams(model_id="m")).stop_reason == "max_tokens"
