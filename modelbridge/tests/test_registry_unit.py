from __future__ import annotations

import pytest

from modelbridge.base.errors import ConfigurationError, ErrorKind, error_kind
from modelbridge.mock import MockEmbeddingModel, MockLanguageModel, MockProviderFactory
from modelbridge.registry import CallableProviderFactory, ProviderRegistry, parse_model_string


def test_resolves_language_and_embedding_models(registry):
    model = registry.language_model("mock/gpt-test")
    assert isinstance(model, MockLanguageModel)  # nosec B101
    assert model.provider == "mock" and model.model_id == "gpt-test"  # nosec B101
    embedder = registry.embedding_model("mock/embed-1")
    assert isinstance(embedder, MockEmbeddingModel) and embedder.model_id == "embed-1"  # nosec B101


def test_provider_lookup_is_case_insensitive(registry):
    assert registry.language_model("MOCK/x").model_id == "x"  # nosec B101
    assert registry.has_provider("Mock")  # nosec B101


def test_model_segment_keeps_later_slashes():
    assert parse_model_string("openrouter/meta/llama-3") == ("openrouter", "meta/llama-3")  # nosec B101


@pytest.mark.parametrize("bad", ["nomatch", "x/", "/model", ""])
def test_malformed_model_strings_raise_configuration_error(registry, bad):
    with pytest.raises(ConfigurationError) as info:
        registry.language_model(bad)
    assert error_kind(info.value) is ErrorKind.CONFIGURATION  # nosec B101


def test_unknown_provider_lists_registered_ids():
    registry = ProviderRegistry()
    registry.register(MockProviderFactory("alpha")).register(MockProviderFactory("Beta"))
    with pytest.raises(ConfigurationError) as info:
        registry.language_model("unknown/model")
    message = str(info.value)
    assert "'unknown'" in message and "alpha, Beta" in message  # nosec B101


def test_unknown_provider_with_empty_registry_says_none():
    with pytest.raises(ConfigurationError, match="Available providers: none"):
        ProviderRegistry().language_model("unknown/model")


def test_reregistration_replaces_previous_factory():
    first = MockLanguageModel(model_id="first")
    second = MockLanguageModel(model_id="second")
    registry = ProviderRegistry()
    registry.register(CallableProviderFactory("local", lambda mid: first))
    registry.register(CallableProviderFactory("LOCAL", lambda mid: second))
    assert registry.language_model("local/anything") is second  # nosec B101
    assert registry.provider_ids == ["LOCAL"]  # nosec B101


def test_each_resolution_builds_a_new_model(registry):
    assert registry.language_model("mock/m") is not registry.language_model("mock/m")  # nosec B101


def test_callable_factory_without_embeddings_raises():
    registry = ProviderRegistry([CallableProviderFactory("local", lambda mid: MockLanguageModel(model_id=mid))])
    with pytest.raises(ConfigurationError):
        registry.embedding_model("local/e")


def test_empty_provider_id_is_rejected():
    with pytest.raises(ConfigurationError):
        ProviderRegistry().register(MockProviderFactory(""))
