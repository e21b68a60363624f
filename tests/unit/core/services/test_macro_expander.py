"""Tests for macro lookup and placeholder substitution."""

from botcmd.core.services.macro_expander import MacroExpander, expand_macro


def test_templates_are_expanded_in_order() -> None:
    assert expand_macro("a $1 $user; b", ["x"], "42") == ["a x 42", "b"]


def test_every_occurrence_is_replaced() -> None:
    assert expand_macro("!say $1 $1 $user $user", ["hi"], "7") == ["!say hi hi 7 7"]


def test_unmatched_placeholders_pass_through() -> None:
    assert expand_macro("!say $2 $0", ["only"], "7") == ["!say $2 $0"]


def test_multi_digit_placeholders() -> None:
    arguments = [str(n) for n in range(1, 12)]
    assert expand_macro("$10 $11 $1", arguments, "u") == ["10 11 1"]


def test_multi_digit_placeholder_without_argument_is_literal() -> None:
    assert expand_macro("$12", ["a"], "u") == ["$12"]


def test_placeholders_inside_words() -> None:
    assert expand_macro("!greet <@$user>", [], "42") == ["!greet <@42>"]


def test_substituted_text_is_not_expanded_again() -> None:
    assert expand_macro("!echo $1", ["$user"], "42") == ["!echo $user"]


def test_blank_templates_are_skipped() -> None:
    assert expand_macro(" ; !a ;; ", [], "1") == ["!a"]


def test_expander_without_resolver_knows_no_macros(server) -> None:
    assert MacroExpander().expand(server, "greet", [], "1") is None


def test_expander_uses_resolver(server) -> None:
    calls = []

    def resolver(srv, name):
        calls.append((srv, name))
        return "!hello $1" if name == "greet" else None

    expander = MacroExpander(resolver)
    assert expander.expand(server, "greet", ["bob"], "1") == ["!hello bob"]
    assert expander.expand(server, "other", [], "1") is None
    assert calls == [(server, "greet"), (server, "other")]
