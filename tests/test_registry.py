"""Tests for protonav.registry."""

from protonav.commands import COMMANDS, default_registry
from protonav.registry import CommandRegistry, CommandSpec


class TestCommandRegistry:
    def test_register_and_lookup(self):
        registry = CommandRegistry()
        spec = CommandSpec("package", "package NAME", "navigation")
        registry.register(spec)
        assert registry.lookup("package") is spec

    def test_lookup_missing(self):
        assert CommandRegistry().lookup("call") is None

    def test_multiple_syntax_lines_share_a_name(self):
        registry = CommandRegistry()
        first = CommandSpec("header", "header KEY=VALUE", "headers")
        registry.register(first)
        registry.register(CommandSpec("header", "header -r KEY", "headers"))
        assert registry.names == ["header"]
        assert len(registry.commands) == 2
        assert registry.lookup("header") is first

    def test_commands_returns_copy(self):
        registry = CommandRegistry()
        registry.register(CommandSpec("show", "show", "query"))
        registry.commands.append(CommandSpec("fake", "", ""))
        assert len(registry.commands) == 1


class TestReferenceCard:
    def test_groups_by_category(self):
        card = default_registry().generate_reference_card()
        assert "NAVIGATION:" in card
        assert "HEADERS:" in card
        assert card.index("NAVIGATION:") < card.index("QUERY:") < card.index("HEADERS:")
        for spec in COMMANDS:
            assert spec.syntax in card

    def test_empty_registry(self):
        assert CommandRegistry().generate_reference_card() == ""
