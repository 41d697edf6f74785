import pytest
from prompt_toolkit.completion import CompleteEvent
from prompt_toolkit.document import Document

from advinput.core.completion import (
    CompletionPair,
    CompletionStrategy,
    StrategyCompleter,
    StrategyKind,
)

DIRECTIONS = ["North", "North East", "South", "Up"]


def test_none_strategy_offers_nothing():
    strategy = CompletionStrategy.none()

    assert strategy.kind is StrategyKind.NONE
    assert strategy.complete("anything", 3) == (3, [])


def test_enum_strategy_matches_whole_line_case_insensitively():
    strategy = CompletionStrategy.enum_match(DIRECTIONS)

    anchor, pairs = strategy.complete("no", 2)

    assert anchor == 0
    assert pairs == [
        CompletionPair(display="North", replacement="North"),
        CompletionPair(display="North East", replacement="North East"),
    ]


def test_enum_strategy_uses_text_before_cursor_including_spaces():
    strategy = CompletionStrategy.enum_match(DIRECTIONS)

    assert strategy.complete("north e", 7) == (0, [CompletionPair("North East", "North East")])
    # only the whole line counts, not the last word
    assert strategy.complete("x up", 4) == (0, [])
    assert strategy.complete("upXYZ", 1) == (0, [CompletionPair("Up", "Up")])


def test_enum_strategy_empty_line_offers_everything():
    anchor, pairs = CompletionStrategy.enum_match(DIRECTIONS).complete("", 0)

    assert anchor == 0
    assert [pair.replacement for pair in pairs] == DIRECTIONS


@pytest.mark.parametrize(
    "line, pos, anchor, expected",
    [
        ("", 0, 0, ["a.json", "ab.json", "B.json"]),
        ("a", 1, 0, ["a.json", "ab.json"]),
        ("ab", 2, 0, ["ab.json"]),
        ("b", 1, 0, []),
        ("conf/a", 6, 5, ["a.json", "ab.json"]),
        ("load B", 6, 5, ["B.json"]),
        ("load\tab", 7, 5, ["ab.json"]),
        ("a more", 1, 0, ["a.json", "ab.json"]),
    ],
)
def test_file_strategy_matches_current_token(line, pos, anchor, expected):
    strategy = CompletionStrategy.file_match(["a.json", "ab.json", "B.json"])

    result_anchor, pairs = strategy.complete(line, pos)

    assert result_anchor == anchor
    assert [pair.replacement for pair in pairs] == expected
    assert all(pair.display == pair.replacement for pair in pairs)


def test_strategy_is_immutable_snapshot():
    names = ["one.json"]
    strategy = CompletionStrategy.file_match(names)
    names.append("two.json")

    assert strategy.candidates == ("one.json",)


def test_completer_follows_active_strategy():
    active = {"strategy": CompletionStrategy.none()}
    completer = StrategyCompleter(lambda: active["strategy"])
    document = Document("conf/a", cursor_position=6)

    assert list(completer.get_completions(document, CompleteEvent())) == []

    active["strategy"] = CompletionStrategy.file_match(["a.json", "b.json"])
    completions = list(completer.get_completions(document, CompleteEvent()))

    assert [completion.text for completion in completions] == ["a.json"]
    assert completions[0].start_position == -1
    assert completions[0].display_text == "a.json"


def test_completer_replaces_whole_line_for_enums():
    completer = StrategyCompleter(lambda: CompletionStrategy.enum_match(DIRECTIONS))
    document = Document("north ", cursor_position=6)

    completions = list(completer.get_completions(document, CompleteEvent()))

    assert [completion.text for completion in completions] == ["North East"]
    assert completions[0].start_position == -6
