from __future__ import annotations

import dataclasses
import unittest
from types import MappingProxyType

from loguru import logger

from acsearch.trie.state import ROOT, AutomatonBuilder, StateGraph, fold_symbol, normalize_keyword


def _walk(graph: StateGraph, word: str) -> int:
    state = ROOT
    for ch in word:
        state = graph.goto[state][ch]
    return state


def _build(*keywords: str, case_insensitive: bool = False) -> StateGraph:
    builder = AutomatonBuilder(case_insensitive=case_insensitive)
    for keyword in keywords:
        builder.insert(keyword)
    return builder.build()


class AutomatonBuilderTestCase(unittest.TestCase):
    def test_trie_shares_prefixes(self) -> None:
        graph = _build("he", "she", "his", "hers")
        # root, h, he, her, hers, hi, his, s, sh, she
        self.assertEqual(graph.state_count, 10)
        self.assertEqual(graph.longest_keyword, 4)

    def test_failure_links_point_to_longest_suffix(self) -> None:
        graph = _build("he", "she", "his", "hers")
        self.assertEqual(graph.fail[_walk(graph, "h")], ROOT)
        self.assertEqual(graph.fail[_walk(graph, "s")], ROOT)
        self.assertEqual(graph.fail[_walk(graph, "sh")], _walk(graph, "h"))
        self.assertEqual(graph.fail[_walk(graph, "she")], _walk(graph, "he"))
        self.assertEqual(graph.fail[_walk(graph, "hers")], _walk(graph, "s"))
        self.assertEqual(graph.fail[_walk(graph, "his")], _walk(graph, "s"))

    def test_outputs_inherit_through_failure_links(self) -> None:
        graph = _build("he", "she", "his", "hers")
        self.assertEqual(graph.emits(_walk(graph, "she")), ("she", "he"))
        self.assertEqual(graph.emits(_walk(graph, "hers")), ("hers",))
        self.assertEqual(graph.emits(_walk(graph, "sh")), ())

    def test_failure_target_is_always_shallower(self) -> None:
        graph = _build("abcab", "bcab", "cab", "ab", "b", "aaaa")
        for state in range(1, graph.state_count):
            self.assertLess(graph.depth[graph.fail[state]], graph.depth[state])

    def test_empty_and_none_keywords_are_ignored(self) -> None:
        builder = AutomatonBuilder()
        builder.insert("")
        builder.insert(None)
        graph = builder.build()
        self.assertEqual(builder.keyword_count, 0)
        self.assertEqual(graph.state_count, 1)
        self.assertEqual(graph.longest_keyword, 0)

    def test_duplicate_keyword_is_stored_once(self) -> None:
        builder = AutomatonBuilder()
        builder.insert("he")
        builder.insert("he")
        graph = builder.build()
        self.assertEqual(builder.keyword_count, 1)
        self.assertEqual(graph.emits(_walk(graph, "he")), ("he",))

    def test_case_insensitive_keywords_are_lowered(self) -> None:
        graph = _build("HeLLo", case_insensitive=True)
        self.assertEqual(graph.emits(_walk(graph, "hello")), ("hello",))

    def test_non_string_keyword_raises(self) -> None:
        with self.assertRaises(TypeError):
            AutomatonBuilder().insert(42)  # type: ignore[arg-type]

    def test_insert_after_build_raises(self) -> None:
        builder = AutomatonBuilder()
        builder.insert("he")
        builder.build()
        with self.assertRaises(RuntimeError):
            builder.insert("she")
        with self.assertRaises(RuntimeError):
            builder.build()

    def test_build_logs_counts(self) -> None:
        messages: list[str] = []
        handler_id = logger.add(messages.append, level="DEBUG", format="{message}")
        try:
            _build("he", "she")
        finally:
            logger.remove(handler_id)
        self.assertTrue(any("keywords=2" in m and "states=6" in m for m in messages))


class StateGraphTestCase(unittest.TestCase):
    def test_graph_is_read_only(self) -> None:
        graph = _build("he")
        with self.assertRaises(TypeError):
            graph.goto[ROOT]["x"] = 7  # type: ignore[index]
        with self.assertRaises(dataclasses.FrozenInstanceError):
            graph.fail = (0,)  # type: ignore[misc]

    def test_next_state_falls_back_to_root(self) -> None:
        graph = _build("he", "she")
        self.assertEqual(graph.next_state(ROOT, "x"), ROOT)
        self.assertEqual(graph.next_state(_walk(graph, "sh"), "e"), _walk(graph, "she"))
        self.assertEqual(graph.next_state(_walk(graph, "sh"), "h"), _walk(graph, "h"))

    def test_mismatched_tables_raise(self) -> None:
        with self.assertRaises(ValueError):
            StateGraph(goto=(MappingProxyType({}),), fail=(0, 0), output=((),), depth=(0,))

    def test_failure_to_deeper_state_raises(self) -> None:
        with self.assertRaises(ValueError):
            StateGraph(
                goto=(MappingProxyType({"a": 1}), MappingProxyType({})),
                fail=(0, 1),
                output=((), ("a",)),
                depth=(0, 1),
            )

    def test_failure_index_out_of_range_raises(self) -> None:
        with self.assertRaises(ValueError):
            StateGraph(
                goto=(MappingProxyType({"a": 1}), MappingProxyType({})),
                fail=(0, 5),
                output=((), ("a",)),
                depth=(0, 1),
            )

    def test_transition_out_of_range_raises(self) -> None:
        with self.assertRaises(ValueError):
            StateGraph(goto=(MappingProxyType({"a": 5}),), fail=(0,), output=((),), depth=(0,))

    def test_transition_to_wrong_depth_raises(self) -> None:
        with self.assertRaises(ValueError):
            StateGraph(
                goto=(MappingProxyType({"a": 1}), MappingProxyType({"b": 1})),
                fail=(0, 0),
                output=((), ()),
                depth=(0, 1),
            )

    def test_output_longer_than_depth_raises(self) -> None:
        with self.assertRaises(ValueError):
            StateGraph(
                goto=(MappingProxyType({"a": 1}), MappingProxyType({})),
                fail=(0, 0),
                output=((), ("xya",)),
                depth=(0, 1),
            )

    def test_empty_output_word_raises(self) -> None:
        with self.assertRaises(ValueError):
            StateGraph(
                goto=(MappingProxyType({"a": 1}), MappingProxyType({})),
                fail=(0, 0),
                output=((), ("",)),
                depth=(0, 1),
            )

    def test_built_graph_passes_checks(self) -> None:
        graph = _build("he", "she", "his", "hers")
        rebuilt = StateGraph(goto=graph.goto, fail=graph.fail, output=graph.output, depth=graph.depth)
        self.assertEqual(rebuilt.state_count, graph.state_count)

    def test_empty_graph_raises(self) -> None:
        with self.assertRaises(ValueError):
            StateGraph(goto=(), fail=(), output=(), depth=())


class CaseFoldingTestCase(unittest.TestCase):
    def test_fold_symbol(self) -> None:
        self.assertEqual(fold_symbol("A"), "a")
        self.assertEqual(fold_symbol("a"), "a")
        # lowering "İ" yields two code points, so it is kept
        self.assertEqual(fold_symbol("İ"), "İ")

    def test_normalize_keyword_keeps_length(self) -> None:
        self.assertEqual(normalize_keyword("İStanbul", True), "İstanbul")
        self.assertEqual(normalize_keyword("Straße", True), "straße")
        self.assertEqual(normalize_keyword("ABC", False), "ABC")


if __name__ == "__main__":
    unittest.main()
