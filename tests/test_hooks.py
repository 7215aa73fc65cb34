from genregraph.config import GenreGraphConfig
from genregraph.hooks import HookManager, HookName
from genregraph.models import Artist, SourceCollections, TimeRange
from genregraph.pipeline import GraphEngine


def _sources() -> SourceCollections:
    artists = [Artist(id=str(i), name=f"Artist {i}", genres=["rock"]) for i in range(3)]
    return SourceCollections(top_artists={TimeRange.LONG: artists})


def test_hook_invocation_order() -> None:
    calls: list[str] = []
    hooks = HookManager()

    for name in (HookName.BEFORE_AGGREGATE, HookName.AFTER_CLASSIFY, HookName.AFTER_LAYOUT):
        hooks.register(name, lambda ctx, env, name=name: calls.append(name.value) or None)

    GraphEngine(config=GenreGraphConfig(), hooks=hooks).build_graph(_sources(), seed=1)

    assert calls == ["before_aggregate", "after_classify", "after_layout"]


def test_hook_envelope_carries_stage_counts() -> None:
    seen: dict[str, dict] = {}
    hooks = HookManager()
    hooks.register(HookName.AFTER_CLASSIFY, lambda ctx, env: seen.setdefault("classify", dict(env)) and None)
    hooks.register(HookName.AFTER_LAYOUT, lambda ctx, env: seen.setdefault("layout", {**env, **ctx}) and None)

    GraphEngine(config=GenreGraphConfig(), hooks=hooks).build_graph(_sources(), seed=1)

    assert seen["classify"] == {"main": 1, "bridge": 0}
    assert seen["layout"]["nodes"] == 4
    assert seen["layout"]["connections"] == 3
    assert seen["layout"]["artist_count"] == 3
    assert seen["layout"]["seed"] == 1


def test_failing_hook_routes_to_error_callbacks() -> None:
    errors: list[Exception] = []
    hooks = HookManager()

    def _boom(ctx, env):
        raise RuntimeError("boom")

    hooks.register(HookName.BEFORE_LAYOUT, _boom)
    hooks.register(HookName.BEFORE_LAYOUT, lambda ctx, env: {"patched": True})
    hooks.register(HookName.ON_ERROR, lambda ctx, env: errors.append(ctx["exception"]) or None)

    result = hooks.emit(HookName.BEFORE_LAYOUT, {"seed": 1}, {})

    assert result == {"patched": True}
    assert len(errors) == 1
    assert str(errors[0]) == "boom"


def test_string_hook_names_and_failing_error_hooks() -> None:
    seen: list[str] = []
    hooks = HookManager()

    def _boom(ctx, env):
        raise ValueError("bad patch")

    def _broken_error_hook(ctx, env):
        raise RuntimeError("error hook broke")

    hooks.register("after_statistics", _boom)
    hooks.register("on_error", _broken_error_hook)
    hooks.register("on_error", lambda ctx, env: seen.append(ctx["hook"]) or None)

    result = hooks.emit(HookName.AFTER_STATISTICS, {}, {"genres": 2})

    assert result == {"genres": 2}
    assert seen == ["after_statistics"]
