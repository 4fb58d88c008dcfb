"""Unit tests for the built-in tokens other than metadata."""

from __future__ import annotations

import pytest

from verscribe.errors import InvalidArgument
from verscribe.tokens.base import BaseToken
from verscribe.tokens.label import LabelToken
from verscribe.tokens.numeric import (
    HeightToken,
    MajorToken,
    MinorToken,
    PatchToken,
    RevisionToken,
    VersionToken,
)
from verscribe.tokens.repository import BranchNameToken, ShaToken

ALL_TOKENS: list[BaseToken] = [
    LabelToken(),
    MajorToken(),
    MinorToken(),
    PatchToken(),
    RevisionToken(),
    HeightToken(),
    VersionToken(),
    ShaToken(),
    BranchNameToken(),
]


# ---------------------------------------------------------------------------
# Test: shared contract
# ---------------------------------------------------------------------------


class TestTokenContract:
    """Every token rejects absent inputs the same way."""

    @pytest.mark.parametrize("token", ALL_TOKENS, ids=lambda t: t.key)
    def test_none_context(self, token, evaluator):
        with pytest.raises(InvalidArgument) as excinfo:
            token.evaluate_with_option(token.default_option, None, evaluator)
        assert excinfo.value.param_name == "context"

    @pytest.mark.parametrize("token", ALL_TOKENS, ids=lambda t: t.key)
    def test_none_evaluator(self, token, context):
        with pytest.raises(InvalidArgument) as excinfo:
            token.evaluate_with_option(token.default_option, context, None)
        assert excinfo.value.param_name == "evaluator"

    @pytest.mark.parametrize("token", ALL_TOKENS, ids=lambda t: t.key)
    def test_none_option(self, token, context, evaluator):
        with pytest.raises(InvalidArgument) as excinfo:
            token.evaluate_with_option(None, context, evaluator)
        assert excinfo.value.param_name == "option_value"

    @pytest.mark.parametrize("token", ALL_TOKENS, ids=lambda t: t.key)
    def test_key_is_lowercase(self, token):
        assert token.key == token.key.lower()

    def test_repr_names_key(self):
        assert "key='sha'" in repr(ShaToken())


# ---------------------------------------------------------------------------
# Test: label
# ---------------------------------------------------------------------------


class TestLabelToken:
    def test_default_joins_with_dot(self, configured_context, evaluator):
        ctx = configured_context(label=["alpha", "1"])
        assert LabelToken().evaluate(ctx, evaluator) == "alpha.1"

    def test_custom_separator(self, configured_context, evaluator):
        ctx = configured_context(label=["alpha", "1"])
        assert LabelToken().evaluate_with_option("-", ctx, evaluator) == "alpha-1"

    def test_empty_label(self, configured_context, evaluator):
        ctx = configured_context()
        assert LabelToken().evaluate(ctx, evaluator) == ""

    def test_star_replaced_with_height(self, configured_context, evaluator):
        ctx = configured_context(label=["beta*"])
        ctx.result.height = 12
        assert LabelToken().evaluate(ctx, evaluator) == "beta12"

    def test_star_without_height_raises(self, configured_context, evaluator):
        ctx = configured_context(label=["beta*"])
        with pytest.raises(InvalidArgument) as excinfo:
            LabelToken().evaluate(ctx, evaluator)
        assert excinfo.value.param_name == "height"

    def test_fragments_expanded(self, configured_context, evaluator):
        ctx = configured_context(label=["pre{major}"])
        assert LabelToken().evaluate(ctx, evaluator) == "pre1"


# ---------------------------------------------------------------------------
# Test: numeric
# ---------------------------------------------------------------------------


class TestNumericTokens:
    def test_components(self, configured_context, evaluator):
        ctx = configured_context(version="4.5.6")
        assert MajorToken().evaluate(ctx, evaluator) == "4"
        assert MinorToken().evaluate(ctx, evaluator) == "5"
        assert PatchToken().evaluate(ctx, evaluator) == "6"

    def test_padding(self, configured_context, evaluator):
        ctx = configured_context()
        ctx.result.height = 7
        assert HeightToken().evaluate_with_option("4", ctx, evaluator) == "0007"

    def test_padding_narrower_than_value(self, configured_context, evaluator):
        ctx = configured_context()
        ctx.result.height = 12345
        assert HeightToken().evaluate_with_option("2", ctx, evaluator) == "12345"

    @pytest.mark.parametrize("option", ["x", "\u00b2", "\u0663", "-2"])
    def test_non_numeric_padding_raises(self, configured_context, evaluator, option):
        ctx = configured_context()
        with pytest.raises(InvalidArgument) as excinfo:
            MajorToken().evaluate_with_option(option, ctx, evaluator)
        assert excinfo.value.param_name == "option_value"

    def test_missing_height_raises(self, configured_context, evaluator):
        ctx = configured_context()
        with pytest.raises(InvalidArgument) as excinfo:
            HeightToken().evaluate(ctx, evaluator)
        assert excinfo.value.param_name == "height"

    def test_revision_defaults_to_zero(self, configured_context, evaluator):
        ctx = configured_context()
        assert RevisionToken().evaluate(ctx, evaluator) == "0"

    def test_revision_configured(self, configured_context, evaluator):
        ctx = configured_context(version="1.2.3.9")
        assert RevisionToken().evaluate_with_option("3", ctx, evaluator) == "009"


class TestVersionToken:
    def test_three_parts(self, configured_context, evaluator):
        ctx = configured_context(version="1.2.3")
        assert VersionToken().evaluate(ctx, evaluator) == "1.2.3"

    def test_two_part_version_defaults_patch(self, configured_context, evaluator):
        ctx = configured_context(version="1.2")
        assert VersionToken().evaluate(ctx, evaluator) == "1.2.0"

    def test_revision_appended(self, configured_context, evaluator):
        ctx = configured_context(version="1.2.3.4")
        assert VersionToken().evaluate(ctx, evaluator) == "1.2.3.4"

    def test_custom_separator(self, configured_context, evaluator):
        ctx = configured_context(version="1.2.3")
        assert VersionToken().evaluate_with_option("_", ctx, evaluator) == "1_2_3"


# ---------------------------------------------------------------------------
# Test: repository-derived
# ---------------------------------------------------------------------------


class TestShaToken:
    def test_full_by_default(self, context, evaluator, head_sha):
        context.result.sha = head_sha
        assert ShaToken().evaluate(context, evaluator) == head_sha

    def test_truncated(self, context, evaluator, head_sha):
        context.result.sha = head_sha
        assert ShaToken().evaluate_with_option("7", context, evaluator) == head_sha[:7]

    @pytest.mark.parametrize("option", ["0", "abc", "-1", "\u00b2", "\u0667"])
    def test_invalid_option(self, context, evaluator, head_sha, option):
        context.result.sha = head_sha
        with pytest.raises(InvalidArgument):
            ShaToken().evaluate_with_option(option, context, evaluator)

    def test_missing_sha(self, context, evaluator):
        with pytest.raises(InvalidArgument) as excinfo:
            ShaToken().evaluate(context, evaluator)
        assert excinfo.value.param_name == "sha"


class TestBranchNameToken:
    @pytest.fixture
    def branch_context(self, context):
        context.result.canonical_branch_name = "refs/heads/feature/Login_Page"
        context.result.branch_name = "feature/Login_Page"
        return context

    def test_short_by_default(self, branch_context, evaluator):
        assert BranchNameToken().evaluate(branch_context, evaluator) == "feature/Login_Page"

    def test_canonical(self, branch_context, evaluator):
        result = BranchNameToken().evaluate_with_option("canonical", branch_context, evaluator)
        assert result == "refs/heads/feature/Login_Page"

    def test_suffix_strips_illegal_characters(self, branch_context, evaluator):
        result = BranchNameToken().evaluate_with_option("suffix", branch_context, evaluator)
        assert result == "featureLoginPage"

    def test_unknown_option(self, branch_context, evaluator):
        with pytest.raises(InvalidArgument):
            BranchNameToken().evaluate_with_option("upper", branch_context, evaluator)

    def test_detached_head_raises(self, context, evaluator):
        with pytest.raises(InvalidArgument) as excinfo:
            BranchNameToken().evaluate(context, evaluator)
        assert excinfo.value.param_name == "branch_name"
