from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path

from class_contracts.classes import GroupDefinition
from class_contracts.errors import PatternCompileError
from class_contracts.extraction import LocatorEntry
from class_contracts.lint import UNSORTED_MESSAGE, LintFinding, LintResult
from class_lint.artifacts import serialize_lint_results, write_lint_report_json
from class_lint.attributes import iter_attribute_spans
from class_lint.config import LintConfig, load_lint_config
from class_lint.module import apply_fixes, lint_file, lint_text

CN_ENTRY = LocatorEntry(r"cn\(([^)]*)\)", r"""["'`]([^"'`]+)["'`]""")


def _fix(text: str, config: LintConfig | None = None) -> str:
    return apply_fixes(text, lint_text(text, config=config).findings)


class TestLintText(unittest.TestCase):
    def test_sorted_jsx_attribute_is_valid(self) -> None:
        result = lint_text('<div className="flex items-center justify-between" />')
        self.assertTrue(result.ok)
        self.assertEqual(result.findings, [])
        self.assertEqual(result.meta, {"candidates": 1, "findings": 0})

    def test_reorders_jsx_classes(self) -> None:
        code = '<div className="items-center flex flex" />'
        result = lint_text(code)
        self.assertEqual(len(result.findings), 1)
        self.assertEqual(result.findings[0].message, UNSORTED_MESSAGE)
        self.assertEqual(apply_fixes(code, result.findings), '<div className="flex items-center" />')

    def test_reorders_vue_template_classes(self) -> None:
        self.assertEqual(lint_text('<template><div class="flex gap-2"></div></template>').findings, [])
        self.assertEqual(
            _fix('<template><div class="gap-2 flex flex"></div></template>'),
            '<template><div class="flex gap-2"></div></template>',
        )

    def test_jsx_expression_literals(self) -> None:
        self.assertEqual(_fix("<div className={'mt-4 flex'} />"), "<div className={'flex mt-4'} />")
        self.assertEqual(_fix("<div className={`mt-4 flex`} />"), "<div className={`flex mt-4`} />")
        # Interpolated template literals are not static class lists.
        self.assertEqual(lint_text("<div className={`mt-4 ${x} flex`} />").findings, [])

    def test_class_regex_option(self) -> None:
        config = LintConfig(class_regex=(LocatorEntry(r"cva\(([^)]*)\)", r"""["'`]([^"'`]+)["'`]"""),))
        self.assertEqual(
            _fix("const button = cva('font-semibold text-sm flex gap-4');", config),
            "const button = cva('flex gap-4 font-semibold text-sm');",
        )

    def test_default_group_ordering(self) -> None:
        self.assertEqual(
            _fix('<div className="bg-red-500 flex mt-4" />'),
            '<div className="flex mt-4 bg-red-500" />',
        )

    def test_group_override(self) -> None:
        config = LintConfig(
            group_definitions=(
                GroupDefinition(name="backgrounds-first", matchers=("^bg-",)),
                GroupDefinition(name="layout", matchers=(".*",)),
            )
        )
        self.assertEqual(_fix('<div className="flex bg-red-500" />', config), '<div className="bg-red-500 flex" />')

    def test_cn_in_vue_class_binding(self) -> None:
        code = """<template>
  <section
    :class="cn('relative size-full  rounded text-sm ', props.class)"
    role="table"
  >
  </section>
</template>"""
        expected = """<template>
  <section
    :class="cn('relative size-full text-sm rounded', props.class)"
    role="table"
  >
  </section>
</template>"""
        result = lint_text(code, config=LintConfig(class_regex=(CN_ENTRY,)))
        self.assertEqual(len(result.findings), 1)
        f = result.findings[0]
        self.assertEqual((f.line, f.column, f.end_line), (3, 16, 3))
        self.assertEqual(f.original, "relative size-full  rounded text-sm ")
        self.assertEqual(apply_fixes(code, result.findings), expected)

    def test_default_class_regex_handles_cn(self) -> None:
        self.assertEqual(
            _fix("const classes = cn('relative size-full  rounded text-sm ', props.class);"),
            "const classes = cn('relative size-full text-sm rounded', props.class);",
        )

    def test_cn_without_inner_pattern_keeps_other_arguments(self) -> None:
        code = """<template>
  <section
    :class="cn('size-full text-sm rounded relative', props.class)"
    role="table"
  >
  </section>
</template>"""
        config = LintConfig(class_regex=(LocatorEntry(r"cn\(([^)]*)\)"),))
        self.assertEqual(
            _fix(code, config),
            code.replace("size-full text-sm rounded relative", "relative size-full text-sm rounded"),
        )

    def test_whitespace_cleanup_is_reported(self) -> None:
        self.assertEqual(_fix('<div class="flex  gap-2 ">'), '<div class="flex gap-2">')

    def test_same_range_reported_once_across_entries(self) -> None:
        config = LintConfig(class_regex=(CN_ENTRY, CN_ENTRY, LocatorEntry(r"cn\(")))
        result = lint_text("cn('mt-4 flex')", config=config)
        self.assertEqual(len(result.findings), 1)
        self.assertEqual(result.meta["candidates"], 3)

    def test_class_regex_without_paren_adds_no_findings(self) -> None:
        config = LintConfig(class_regex=(LocatorEntry(r'class="([^"]*)"'),), attributes=False)
        self.assertEqual(lint_text('<div class="mt-4 flex">', config=config).findings, [])

    def test_attributes_can_be_disabled(self) -> None:
        self.assertEqual(lint_text('<div class="mt-4 flex">', config=LintConfig(attributes=False)).findings, [])

    def test_findings_sorted_by_range(self) -> None:
        code = "cn('mt-4 flex')\n<div class=\"mt-4 flex\">"
        result = lint_text(code)
        self.assertEqual([f.line for f in result.findings], [1, 2])

    def test_invalid_pattern_fails_fast(self) -> None:
        with self.assertRaises(PatternCompileError):
            lint_text('<div class="mt-4 flex">', config=LintConfig(class_regex=(LocatorEntry("cn\\(("),)))
        with self.assertRaises(PatternCompileError):
            lint_text(
                '<div class="mt-4 flex">',
                config=LintConfig(group_definitions=(GroupDefinition(name="bad", matchers=("(",)),)),
            )

    def test_custom_resolver(self) -> None:
        result = lint_text('<div class="flex flex">', resolver=lambda tokens: tokens)
        self.assertEqual(result.findings, [])


class TestAttributeSpans(unittest.TestCase):
    def test_bound_and_member_class_are_ignored(self) -> None:
        text = """<a :class="x y" v-bind:class="c d" data-class="e f" class='g h'>{props.class = "i j"}"""
        self.assertEqual([m.value for m in iter_attribute_spans(text)], ["g h"])


class TestApplyFixes(unittest.TestCase):
    def _finding(self, start: int, end: int, replacement: str) -> LintFinding:
        return LintFinding(
            start=start,
            end=end,
            line=1,
            column=start,
            end_line=1,
            end_column=end,
            original="",
            replacement=replacement,
        )

    def test_overlapping_findings_are_skipped(self) -> None:
        text = "abcdef"
        out = apply_fixes(text, [self._finding(3, 5, "X"), self._finding(0, 4, "Y")])
        self.assertEqual(out, "Yef")

    def test_non_overlapping_findings_apply_in_any_order(self) -> None:
        text = "aa bb cc"
        out = apply_fixes(text, [self._finding(6, 8, "C"), self._finding(0, 2, "A")])
        self.assertEqual(out, "A bb C")


class TestLintFile(unittest.TestCase):
    def test_missing_file_is_reported(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            result = lint_file(Path(tmp) / "missing.vue")
        self.assertFalse(result.ok)
        self.assertEqual([e.code for e in result.errors], ["LINT_READ_ERROR"])

    def test_fix_rewrites_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            src = Path(tmp) / "App.tsx"
            src.write_text('<div className="bg-red-500 flex mt-4" />\n', encoding="utf-8")

            checked = lint_file(src)
            self.assertFalse(checked.fixed)
            self.assertEqual(len(checked.findings), 1)
            self.assertEqual(src.read_text(encoding="utf-8"), '<div className="bg-red-500 flex mt-4" />\n')

            fixed = lint_file(src, fix=True)
            self.assertTrue(fixed.ok)
            self.assertTrue(fixed.fixed)
            self.assertEqual(src.read_text(encoding="utf-8"), '<div className="flex mt-4 bg-red-500" />\n')

            # Second pass is clean.
            self.assertEqual(lint_file(src).findings, [])

    def test_report_is_deterministic(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            src = Path(tmp) / "a.vue"
            src.write_text("<div class=\"mt-4 flex\"></div>\ncn('p-2 block')\n", encoding="utf-8")

            r1 = serialize_lint_results([lint_file(src)])
            r2 = serialize_lint_results([lint_file(src)])
            self.assertEqual(r1, r2)

            out_file = Path(tmp) / "reports" / "lint.json"
            write_lint_report_json(results=[lint_file(src)], out_file=out_file)
            payload = json.loads(out_file.read_text(encoding="utf-8"))
            self.assertEqual(payload["findings"], 2)
            self.assertTrue(payload["ok"])
            restored = LintResult.from_dict(payload["files"][0])
            self.assertEqual(restored, lint_file(src))


class TestLintConfig(unittest.TestCase):
    def test_from_dict_uses_rule_option_names(self) -> None:
        config = LintConfig.from_dict(
            {
                "classRegex": ["cn\\(", ["cva\\(", "'([^']*)'"]],
                "groupDefinitions": [{"name": "bg", "matchers": ["^bg-"]}],
                "debug": True,
            }
        )
        self.assertEqual(config.class_regex, (LocatorEntry("cn\\("), LocatorEntry("cva\\(", "'([^']*)'")))
        self.assertEqual(config.group_definitions, (GroupDefinition(name="bg", matchers=("^bg-",)),))
        self.assertTrue(config.attributes)
        self.assertTrue(config.debug)

    def test_missing_class_regex_keeps_defaults(self) -> None:
        self.assertIsNone(LintConfig.from_dict({}).class_regex)
        self.assertEqual(LintConfig.from_dict({"classRegex": []}).class_regex, ())

    def test_unknown_option_rejected(self) -> None:
        with self.assertRaises(ValueError):
            LintConfig.from_dict({"classRegexes": []})

    def test_malformed_entries_rejected(self) -> None:
        with self.assertRaises(TypeError):
            LintConfig.from_dict({"classRegex": [["a", "b", "c"]]})
        with self.assertRaises(TypeError):
            LintConfig.from_dict({"groupDefinitions": [{"name": "x"}]})

    def test_load_from_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            cfg = Path(tmp) / "classlist.json"
            cfg.write_text(json.dumps({"attributes": False}), encoding="utf-8")
            self.assertFalse(load_lint_config(cfg).attributes)


if __name__ == "__main__":
    unittest.main()
