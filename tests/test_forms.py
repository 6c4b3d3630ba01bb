"""Tests for lognaming.forms — the logger-form resolver."""

import logging

import pytest

from lognaming.config import CategoryCase, NamingConfig, NamingOptions
from lognaming.forms import (
    ArgKind, Literal, ResolvedCall, classify_argument, resolve_logger_form,
)
from lognaming.frames import NO_CONTEXT, Frame, FrameChain
from lognaming.namespaces import Namespace
from lognaming.symbols import Keyword, Symbol


APP = Namespace("APP")


class TestClassifyArgument:
    """One-shot classification of the first argument."""

    @pytest.mark.parametrize("args, kind", [
        ((), ArgKind.DEFAULT),
        (("message %s", 1), ArgKind.DEFAULT),
        ((Keyword("worker"),), ArgKind.KEYWORD),
        ((Literal("db"),), ArgKind.LITERAL),
        ((Symbol("db"),), ArgKind.LITERAL),
        ((logging.getLogger("x"),), ArgKind.EXPRESSION),
        ((42,), ArgKind.EXPRESSION),
    ])
    def test_kinds(self, args, kind):
        assert classify_argument(args) is kind


class TestLiteral:
    def test_identifier_is_symbol(self):
        assert Literal("db").evaluate() == Symbol("db")

    def test_python_literal(self):
        assert Literal("('app', 'db')").evaluate() == ("app", "db")

    def test_value_passes_through(self):
        value = ["a", "b"]
        assert Literal(value).evaluate() is value

    def test_bad_source_propagates(self):
        with pytest.raises(ValueError):
            Literal("open('x')").evaluate()

    def test_syntax_error_propagates(self):
        with pytest.raises(SyntaxError):
            Literal("(").evaluate()


class TestDefaultStrategy:
    """No arguments, or a message string first."""

    def test_no_args_no_context(self, registry):
        result = resolve_logger_form(APP, NO_CONTEXT, (), obtain_logger=registry)
        assert isinstance(result, ResolvedCall)
        assert result.logger.name == "app"
        assert result.args == ()

    def test_message_is_not_consumed(self, registry):
        result = resolve_logger_form(APP, None, ("hello %s", "world"),
                                     obtain_logger=registry)
        assert result.logger.name == "app"
        assert result.args == ("hello %s", "world")

    def test_enclosing_names_appended(self, registry):
        chain = FrameChain([Frame.flet("baz"), Frame.lambda_(),
                            Frame.labels("bar"), Frame.method("foo")])
        result = resolve_logger_form(APP, chain, (), obtain_logger=registry)
        assert result.logger.name == "app:foo:bar:baz"

    def test_frame_names_follow_case_policy(self, registry):
        chain = FrameChain([Frame.named("HANDLER")])
        opts = NamingOptions(category_case=CategoryCase.UPPER)
        result = resolve_logger_form(Namespace("app"), chain, (), opts, registry)
        assert result.logger.name == "APP:HANDLER"

    def test_shortest_alias_used(self, registry):
        ns = Namespace("myapp.server", aliases=("srv",))
        result = resolve_logger_form(ns, NO_CONTEXT, (), obtain_logger=registry)
        assert result.logger.name == "srv"

    def test_custom_separator(self, registry):
        chain = FrameChain([Frame.method("Server", "run")])
        opts = NamingOptions(category_separator=".")
        result = resolve_logger_form(APP, chain, (), opts, registry)
        assert result.logger.name == "app.Server.run"


class TestKeywordStrategy:
    """A keyword-like token names a child of the namespace."""

    def test_worker(self, registry):
        result = resolve_logger_form(APP, NO_CONTEXT,
                                     (Keyword(":worker"), "started"),
                                     obtain_logger=registry)
        assert result.logger.name == "app:worker"
        assert result.args == ("started",)

    def test_keyword_is_cased(self, registry):
        result = resolve_logger_form(APP, NO_CONTEXT, (Keyword("WORKER"),),
                                     obtain_logger=registry)
        assert result.logger.name == "app:worker"

    def test_mixed_case_keyword_is_lowered(self, registry):
        result = resolve_logger_form(APP, NO_CONTEXT, (Keyword("Worker"),),
                                     obtain_logger=registry)
        assert result.logger.name == "app:worker"

    def test_preserve_keeps_keyword_spelling(self, registry):
        opts = NamingOptions(category_case=CategoryCase.PRESERVE)
        result = resolve_logger_form(APP, NO_CONTEXT, (Keyword("Worker"),),
                                     opts, registry)
        assert result.logger.name == "APP:Worker"

    def test_enclosing_frames_ignored(self, registry):
        chain = FrameChain([Frame.named("handler")])
        result = resolve_logger_form(APP, chain, (Keyword("io"),),
                                     obtain_logger=registry)
        assert result.logger.name == "app:io"


class TestLiteralStrategy:
    """Literals are evaluated, then named, joined, or passed through."""

    def test_symbol_value(self, registry):
        result = resolve_logger_form(APP, NO_CONTEXT, (Literal("db"), "x"),
                                     obtain_logger=registry)
        assert result.logger.name == "app:db"
        assert result.args == ("x",)

    def test_bare_symbol(self, registry):
        result = resolve_logger_form(APP, NO_CONTEXT, (Symbol("DB"),),
                                     obtain_logger=registry)
        assert result.logger.name == "app:db"

    def test_string_value(self, registry):
        result = resolve_logger_form(APP, NO_CONTEXT, (Literal("'cache'"),),
                                     obtain_logger=registry)
        assert result.logger.name == "app:cache"

    def test_sequence_value(self, registry):
        result = resolve_logger_form(APP, NO_CONTEXT,
                                     (Literal("['app', 'db', 'pool']"), 1, 2),
                                     obtain_logger=registry)
        assert result.logger.name == "app:db:pool"
        assert result.args == (1, 2)

    def test_sequence_is_not_prefixed(self, registry):
        result = resolve_logger_form(Namespace("other"), NO_CONTEXT,
                                     (Literal(("app", "db", "pool")),),
                                     obtain_logger=registry)
        assert result.logger.name == "app:db:pool"

    def test_sequence_symbols_cased(self, registry):
        value = [Symbol("APP"), "DB", Keyword("Pool")]
        result = resolve_logger_form(APP, NO_CONTEXT, (Literal(value),),
                                     obtain_logger=registry)
        assert result.logger.name == "app:DB:Pool"

    def test_sequence_custom_separator(self, registry):
        opts = NamingOptions(category_separator="/")
        result = resolve_logger_form(APP, NO_CONTEXT,
                                     (Literal(["a", "b"]),), opts, registry)
        assert result.logger.name == "a/b"

    @pytest.mark.parametrize("literal", [Literal("[]"), Literal(()), Literal("()")])
    def test_empty_sequence_uses_default_name(self, registry, literal):
        chain = FrameChain([Frame.named("handler")])
        result = resolve_logger_form(APP, chain, (literal, "msg"),
                                     obtain_logger=registry)
        assert result.logger.name == "app:handler"
        assert result.args == ("msg",)

    def test_mixed_case_symbol_is_lowered(self, registry):
        result = resolve_logger_form(APP, NO_CONTEXT, (Literal("Cache"),),
                                     obtain_logger=registry)
        assert result.logger.name == "app:cache"

    def test_other_value_is_the_logger(self, registry):
        result = resolve_logger_form(APP, NO_CONTEXT, (Literal("42"), "msg"),
                                     obtain_logger=registry)
        assert result.logger == 42
        assert result.args == ("msg",)
        assert registry.requested == []

    def test_evaluation_errors_propagate(self, registry):
        with pytest.raises(ValueError):
            resolve_logger_form(APP, NO_CONTEXT, (Literal("1 + x"),),
                                obtain_logger=registry)


class TestExpressionStrategy:
    """Anything else is already a logger."""

    def test_logger_passes_through(self, registry):
        logger = logging.getLogger("explicit")
        result = resolve_logger_form(APP, NO_CONTEXT, (logger, "msg"),
                                     obtain_logger=registry)
        assert result.logger is logger
        assert result.args == ("msg",)
        assert registry.requested == []


class TestRegistryAndConfig:
    def test_default_registry_is_stdlib_logging(self):
        result = resolve_logger_form(Namespace("lognaming_tests"), NO_CONTEXT,
                                     (Keyword("stdlib"),))
        assert result.logger is logging.getLogger("lognaming_tests:stdlib")

    def test_registry_errors_propagate(self):
        def broken(name):
            raise KeyError(name)

        with pytest.raises(KeyError):
            resolve_logger_form(APP, NO_CONTEXT, (), obtain_logger=broken)

    def test_naming_config_per_namespace(self, registry):
        cfg = NamingConfig(namespaces={"myapp": {"category_separator": "."}})
        result = resolve_logger_form(Namespace("myapp.db"), NO_CONTEXT,
                                     (Keyword("pool"),), cfg, registry)
        assert result.logger.name == "myapp.db.pool"

    def test_namespace_given_by_name(self, registry):
        result = resolve_logger_form("some.module", NO_CONTEXT, (),
                                     obtain_logger=registry)
        assert result.logger.name == "some.module"

    def test_same_name_same_logger(self, registry):
        a = resolve_logger_form(APP, NO_CONTEXT, (Keyword("x"),),
                                obtain_logger=registry)
        b = resolve_logger_form(APP, NO_CONTEXT, (Literal("x"),),
                                obtain_logger=registry)
        assert a.logger is b.logger
