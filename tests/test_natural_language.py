import asyncio
from types import SimpleNamespace

import numpy as np
import pytest
from openai import OpenAIError

from MATRIXtools import MatrixParseError, RemoteServiceError
from MATRIXtools.funcs.natural_language import (
    AIConfig,
    NaturalLanguageOperations,
    mock_parse_natural_language,
    parse_natural_language_with_ai
)
from MATRIXtools.funcs.natural_language.constants import SYSTEM_PROMPT
from MATRIXtools.funcs.transforms import PRESET_TRANSFORMS, TransformOperations


class FakeCompletions:
    def __init__(self, content=None, error=None):
        self.content = content
        self.error = error
        self.calls = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


class FakeClient:
    def __init__(self, content=None, error=None):
        self.completions = FakeCompletions(content, error)
        self.chat = SimpleNamespace(completions=self.completions)


CONFIG = AIConfig(api_key="sk-test")


##########################################################################################
# keyword mapper
##########################################################################################


def test_rotate():
    assert np.allclose(mock_parse_natural_language("rotate 90"), [[0, -1], [1, 0]], atol=1e-12)
    assert np.array_equal(mock_parse_natural_language("旋转45"),
                          TransformOperations().rotation_matrix(45))
    assert np.array_equal(mock_parse_natural_language("  ROTATE 30 degrees "),
                          TransformOperations().rotation_matrix(30))


def test_unrecognised_text_is_none():
    assert mock_parse_natural_language("xyz") is None
    assert mock_parse_natural_language("") is None
    # rotate without an angle matches nothing else either
    assert mock_parse_natural_language("rotate") is None


def test_reflect():
    assert np.array_equal(mock_parse_natural_language("reflect x"), PRESET_TRANSFORMS["reflect_x"])
    assert np.array_equal(mock_parse_natural_language("沿x轴反射"), PRESET_TRANSFORMS["reflect_x"])
    assert np.array_equal(mock_parse_natural_language("镜像 横轴"), PRESET_TRANSFORMS["reflect_x"])
    assert np.array_equal(mock_parse_natural_language("Reflect across the Y axis"),
                          PRESET_TRANSFORMS["reflect_y"])
    assert np.array_equal(mock_parse_natural_language("反射y轴"), PRESET_TRANSFORMS["reflect_y"])


def test_scale_and_shear():
    assert np.array_equal(mock_parse_natural_language("scale 2.5"), [[2.5, 0], [0, 2.5]])
    assert np.array_equal(mock_parse_natural_language("缩放2倍"), [[2, 0], [0, 2]])
    assert np.array_equal(mock_parse_natural_language("shear 1.5"), [[1, 1.5], [0, 1]])
    assert np.array_equal(mock_parse_natural_language("剪切0.5"), [[1, 0.5], [0, 1]])


def test_squeeze():
    assert np.array_equal(mock_parse_natural_language("squeeze"), [[2, 0], [0, 0.5]])
    assert np.array_equal(mock_parse_natural_language("挤压"), [[2, 0], [0, 0.5]])


##########################################################################################
# reply validation
##########################################################################################


def test_parse_matrix_reply():
    ops = NaturalLanguageOperations()
    assert np.array_equal(ops.parse_matrix_reply("[[1, 2], [3, 4.5]]"), [[1, 2], [3, 4.5]])
    assert np.array_equal(ops.parse_matrix_reply("```json\n[[0, -1], [1, 0]]\n```"),
                          [[0, -1], [1, 0]])


@pytest.mark.parametrize("content", [
    "not json",
    "[[1, 2], [3, 4], [5, 6]]",
    "[[1, 2, 3], [4, 5, 6]]",
    "[1, 2]",
    '{"matrix": [[1, 0], [0, 1]]}',
    '[[1, "2"], [3, 4]]',
    "[[1, true], [0, 1]]",
    "[[1, null], [0, 1]]",
    "[[NaN, 1], [0, 1]]",
    "[[Infinity, 0], [0, 1]]",
    "[[1, 0], [-Infinity, 1]]",
    "[[1e400, 0], [0, 1]]",
    "[[1" + "0" * 400 + ", 0], [0, 1]]",
    "[[1" + "0" * 5000 + ", 0], [0, 1]]",
])
def test_parse_matrix_reply_rejects(content):
    with pytest.raises(MatrixParseError, match="Failed to parse matrix"):
        NaturalLanguageOperations().parse_matrix_reply(content)


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        NaturalLanguageOperations().parse_matrix_reply("[[1]]")


##########################################################################################
# remote mapper
##########################################################################################


def test_remote_request_and_reply():
    client = FakeClient(content=" [[0, -1], [1, 0]] ")
    out = asyncio.run(parse_natural_language_with_ai("turn a quarter", CONFIG, client=client))

    assert np.array_equal(out, [[0, -1], [1, 0]])
    (call,) = client.completions.calls
    assert call["model"] == "gpt-3.5-turbo"
    assert call["temperature"] == 0.3
    assert call["messages"][0] == {"role": "system", "content": SYSTEM_PROMPT}
    assert call["messages"][1] == {"role": "user", "content": "turn a quarter"}


def test_remote_failure_is_reported():
    client = FakeClient(error=OpenAIError("connection refused"))
    with pytest.raises(RemoteServiceError, match="connection refused"):
        asyncio.run(parse_natural_language_with_ai("spin", CONFIG, client=client))


@pytest.mark.parametrize("content", [None, "", "   "])
def test_remote_empty_reply(content):
    client = FakeClient(content=content)
    with pytest.raises(RemoteServiceError, match="empty"):
        asyncio.run(parse_natural_language_with_ai("spin", CONFIG, client=client))


def test_remote_malformed_reply():
    client = FakeClient(content="Sure! Here is your matrix.")
    with pytest.raises(MatrixParseError):
        asyncio.run(parse_natural_language_with_ai("spin", CONFIG, client=client))


def test_missing_key_fails_before_request():
    client = FakeClient(content="[[1, 0], [0, 1]]")
    with pytest.raises(RemoteServiceError):
        asyncio.run(parse_natural_language_with_ai("spin", AIConfig(api_key=""), client=client))
    assert client.completions.calls == []


def test_config_from_env(monkeypatch):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    with pytest.raises(RemoteServiceError):
        AIConfig.from_env()

    monkeypatch.setenv("OPENAI_API_KEY", "sk-env")
    monkeypatch.setenv("OPENAI_BASE_URL", "http://localhost:8000/v1")
    monkeypatch.delenv("OPENAI_MODEL", raising=False)
    config = AIConfig.from_env()
    assert config.api_key == "sk-env"
    assert config.base_url == "http://localhost:8000/v1"
    assert config.model == "gpt-3.5-turbo"


def test_parse_prefers_keyword_rules():
    client = FakeClient(content="[[9, 9], [9, 9]]")
    ops = NaturalLanguageOperations()

    out = ops.parse("squeeze", CONFIG, client=client)
    assert np.array_equal(out, [[2, 0], [0, 0.5]])
    assert client.completions.calls == []

    out = ops.parse("make it nine everywhere", CONFIG, client=client)
    assert np.array_equal(out, [[9, 9], [9, 9]])
    assert len(client.completions.calls) == 1

    assert ops.parse("make it nine everywhere") is None


@pytest.mark.parametrize("content", ["[[NaN, 0], [0, 1]]", "[[1" + "0" * 400 + ", 0], [0, 1]]"])
def test_remote_non_finite_reply(content):
    client = FakeClient(content=content)
    with pytest.raises(MatrixParseError):
        asyncio.run(parse_natural_language_with_ai("spin", CONFIG, client=client))
