"""Test template resolution end to end.

Validates that TemplateResolver resolves each variable once, in
first-appearance order, via resolver then fallback, and that any
unresolvable variable cancels the whole call.
"""

import pytest

from template_resolver import (
    Resolver,
    TemplateResolver,
    VariableResolutionCancelled,
    mapping_fallback,
    resolve,
)

from .conftest import RecordingFallback, make_resolver


class TestFastPath:
    """Templates without placeholders never touch resolvers or handlers."""

    @pytest.mark.asyncio
    async def test_returns_template_unchanged(self, registry):
        resolver, clipboard_reads = make_resolver("CLIPBOARD", "secret")
        registry.register(resolver)
        fallback = RecordingFallback({"CLIPBOARD": "x"})

        result = await TemplateResolver(registry).resolve("no vars here", fallback)

        assert result == "no vars here"
        assert clipboard_reads.calls == 0
        assert fallback.requested == []

    @pytest.mark.asyncio
    async def test_malformed_placeholders_are_fast_path(self, registry):
        fallback = RecordingFallback()
        result = await TemplateResolver(registry).resolve("{name} {A1} {", fallback)
        assert result == "{name} {A1} {"
        assert fallback.requested == []


class TestFullResolution:
    @pytest.mark.asyncio
    async def test_resolver_and_fallback_combined(self, registry):
        filename, _ = make_resolver("FILENAME", "main.ts")
        registry.register(filename)
        fallback = RecordingFallback({"NAME": "Ada"})

        result = await TemplateResolver(registry).resolve("Hi {NAME}, file {FILENAME}", fallback)

        assert result == "Hi Ada, file main.ts"
        assert fallback.requested == ["NAME"]

    @pytest.mark.asyncio
    async def test_repeated_placeholder_resolved_once(self, registry):
        resolver, counter = make_resolver("X", "7")
        registry.register(resolver)

        result = await TemplateResolver(registry).resolve("{X}-{X}")

        assert result == "7-7"
        assert counter.calls == 1

    @pytest.mark.asyncio
    async def test_resolution_follows_first_appearance_order(self, registry):
        order: list[str] = []

        def tracking(name):
            async def _resolve():
                order.append(name)
                return name.lower()

            return Resolver(name=name, resolve=_resolve)

        for name in ("A", "B", "C"):
            registry.register(tracking(name))

        result = await TemplateResolver(registry).resolve("{C} {A} {C} {B}")

        assert order == ["C", "A", "B"]
        assert result == "c a c b"

    @pytest.mark.asyncio
    async def test_fallback_prompts_in_template_order(self, registry):
        fallback = RecordingFallback({"Z": "z", "Y": "y", "X": "x"})
        await TemplateResolver(registry).resolve("{Z}{Y}{Z}{X}", fallback)
        assert fallback.requested == ["Z", "Y", "X"]

    @pytest.mark.asyncio
    async def test_resolver_none_falls_back(self, registry):
        resolver, counter = make_resolver("FILENAME", None)
        registry.register(resolver)
        fallback = RecordingFallback({"FILENAME": "typed.py"})

        result = await TemplateResolver(registry).resolve("{FILENAME}", fallback)

        assert result == "typed.py"
        assert counter.calls == 1
        assert fallback.requested == ["FILENAME"]

    @pytest.mark.asyncio
    async def test_resolver_value_skips_fallback(self, registry):
        registry.register(make_resolver("A", "from resolver")[0])
        fallback = RecordingFallback({"A": "from fallback"})

        assert await TemplateResolver(registry).resolve("{A}", fallback) == "from resolver"
        assert fallback.requested == []

    @pytest.mark.asyncio
    async def test_empty_string_is_a_value(self, registry):
        registry.register(make_resolver("SELECTION", "")[0])
        fallback = RecordingFallback()

        result = await TemplateResolver(registry).resolve("[{SELECTION}]", fallback)

        assert result == "[]"
        assert fallback.requested == []

    @pytest.mark.asyncio
    async def test_unknown_text_around_placeholders_kept(self, registry):
        registry.register(make_resolver("A", "1")[0])
        result = await TemplateResolver(registry).resolve("{a} {A} {A1} {A}")
        assert result == "{a} 1 {A1} 1"


class TestLiteralSubstitution:
    @pytest.mark.asyncio
    async def test_dollar_and_backslash_inserted_verbatim(self, registry):
        registry.register(make_resolver("V", r"$& $1 \1 \g<0> $$")[0])
        result = await TemplateResolver(registry).resolve("<{V}>")
        assert result == r"<$& $1 \1 \g<0> $$>"

    @pytest.mark.asyncio
    async def test_value_containing_placeholder_not_expanded(self, registry):
        registry.register(make_resolver("CLIPBOARD", "use {FILENAME} here")[0])
        registry.register(make_resolver("FILENAME", "main.py")[0])

        result = await TemplateResolver(registry).resolve("{CLIPBOARD} / {FILENAME}")

        assert result == "use {FILENAME} here / main.py"


class TestCancellation:
    @pytest.mark.asyncio
    async def test_fallback_declines(self, registry):
        with pytest.raises(VariableResolutionCancelled) as exc_info:
            await TemplateResolver(registry).resolve("{Y}", RecordingFallback())
        assert exc_info.value.variable_name == "Y"
        assert "Y" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_no_fallback_and_no_resolver(self, registry):
        with pytest.raises(VariableResolutionCancelled) as exc_info:
            await TemplateResolver(registry).resolve("Hello {WHO}")
        assert exc_info.value.variable_name == "WHO"

    @pytest.mark.asyncio
    async def test_resolver_none_without_fallback(self, registry):
        registry.register(make_resolver("FILENAME", None)[0])
        with pytest.raises(VariableResolutionCancelled) as exc_info:
            await TemplateResolver(registry).resolve("{FILENAME}")
        assert exc_info.value.variable_name == "FILENAME"

    @pytest.mark.asyncio
    async def test_stops_at_first_failure(self, registry):
        later, later_calls = make_resolver("C", "c")
        registry.register(make_resolver("A", "a")[0])
        registry.register(later)
        fallback = RecordingFallback()

        with pytest.raises(VariableResolutionCancelled) as exc_info:
            await TemplateResolver(registry).resolve("{A} {B} {C}", fallback)

        assert exc_info.value.variable_name == "B"
        assert fallback.requested == ["B"]
        assert later_calls.calls == 0


class TestResolverErrors:
    @pytest.mark.asyncio
    async def test_resolver_exception_propagates(self, registry):
        async def broken():
            raise RuntimeError("clipboard unavailable")

        registry.register(Resolver(name="CLIPBOARD", resolve=broken))
        fallback = RecordingFallback({"CLIPBOARD": "never used"})

        with pytest.raises(RuntimeError, match="clipboard unavailable"):
            await TemplateResolver(registry).resolve("{CLIPBOARD}", fallback)
        assert fallback.requested == []

    @pytest.mark.asyncio
    async def test_fallback_exception_propagates(self, registry):
        async def broken(name):
            raise ValueError(name)

        with pytest.raises(ValueError):
            await TemplateResolver(registry).resolve("{A}", broken)


class TestConvenienceApi:
    @pytest.mark.asyncio
    async def test_module_resolve_with_explicit_registry(self, registry):
        registry.register(make_resolver("A", "1")[0])
        result = await resolve("{A}{B}", mapping_fallback({"B": "2"}), registry=registry)
        assert result == "12"

    @pytest.mark.asyncio
    async def test_mapping_fallback_missing_name_cancels(self, registry):
        with pytest.raises(VariableResolutionCancelled):
            await resolve("{B}", mapping_fallback({"A": "1"}), registry=registry)

    def test_resolver_uses_given_registry(self, registry):
        assert TemplateResolver(registry).registry is registry
