"""Unit tests for MetadataToken — argument checks and separator handling."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from verscribe.errors import InvalidArgument
from verscribe.models.configuration import VersionConfiguration
from verscribe.pipeline.context import VersionContext
from verscribe.tokens.metadata import MetadataToken

FRAGMENTS = ["alpha", "beta", "gamma"]


@pytest.fixture
def token() -> MetadataToken:
    return MetadataToken()


@pytest.fixture
def passthrough_evaluator() -> MagicMock:
    """An evaluator stand-in that returns every template unchanged."""
    evaluator = MagicMock()
    evaluator.process.side_effect = lambda template, context: template
    return evaluator


@pytest.fixture
def metadata_context(context: VersionContext) -> VersionContext:
    context.configuration = VersionConfiguration(metadata=FRAGMENTS)
    return context


class TestMetadataTokenIdentity:
    def test_key(self, token):
        assert token.key == "metadata"

    def test_default_option_is_dot(self):
        assert MetadataToken.default_option == "."


class TestMetadataTokenArguments:
    """Absent inputs are rejected, each naming its parameter."""

    def test_none_context_raises(self, token, passthrough_evaluator):
        with pytest.raises(InvalidArgument) as excinfo:
            token.evaluate_with_option(MetadataToken.default_option, None, passthrough_evaluator)
        assert excinfo.value.param_name == "context"

    def test_none_evaluator_raises(self, token, metadata_context):
        with pytest.raises(InvalidArgument) as excinfo:
            token.evaluate_with_option(MetadataToken.default_option, metadata_context, None)
        assert excinfo.value.param_name == "evaluator"

    def test_none_option_raises(self, token, metadata_context, passthrough_evaluator):
        with pytest.raises(InvalidArgument) as excinfo:
            token.evaluate_with_option(None, metadata_context, passthrough_evaluator)
        assert excinfo.value.param_name == "option_value"

    def test_invalid_argument_is_value_error(self, token, passthrough_evaluator):
        with pytest.raises(ValueError):
            token.evaluate_with_option(".", None, passthrough_evaluator)

    def test_missing_configuration_raises(self, token, context, passthrough_evaluator):
        with pytest.raises(InvalidArgument) as excinfo:
            token.evaluate_with_option(".", context, passthrough_evaluator)
        assert excinfo.value.param_name == "configuration"


class TestMetadataTokenJoin:
    def test_default_option_joins_with_dot(self, token, metadata_context, passthrough_evaluator):
        result = token.evaluate_with_option(
            MetadataToken.default_option, metadata_context, passthrough_evaluator
        )
        assert result == "alpha.beta.gamma"

    def test_evaluate_uses_default(self, token, metadata_context, passthrough_evaluator):
        assert token.evaluate(metadata_context, passthrough_evaluator) == "alpha.beta.gamma"

    @pytest.mark.parametrize("option", ["", "\t\t  "])
    def test_whitespace_option_used_verbatim(
        self, token, metadata_context, passthrough_evaluator, option
    ):
        result = token.evaluate_with_option(option, metadata_context, passthrough_evaluator)
        assert result == option.join(FRAGMENTS)

    def test_empty_option_concatenates(self, token, metadata_context, passthrough_evaluator):
        assert token.evaluate_with_option("", metadata_context, passthrough_evaluator) == "alphabetagamma"

    @pytest.mark.parametrize("option", [".thi", "-", "test"])
    def test_string_option_joins(self, token, metadata_context, passthrough_evaluator, option):
        result = token.evaluate_with_option(option, metadata_context, passthrough_evaluator)
        assert result == option.join(FRAGMENTS)

    def test_no_fragments_yields_empty(self, token, context, passthrough_evaluator):
        context.configuration = VersionConfiguration()
        assert token.evaluate_with_option("+", context, passthrough_evaluator) == ""

    def test_fragments_expanded_through_evaluator(self, token, metadata_context, passthrough_evaluator):
        token.evaluate_with_option("-", metadata_context, passthrough_evaluator)
        processed = [call.args[0] for call in passthrough_evaluator.process.call_args_list]
        assert processed == FRAGMENTS

    def test_fragment_tokens_resolve(self, token, context, evaluator):
        context.configuration = VersionConfiguration(metadata=["build", "{branchname}"])
        context.result.branch_name = "main"
        assert token.evaluate_with_option(".", context, evaluator) == "build.main"
