"""
Tests for the reference validator.
"""

import unittest

from doccorpus.config import ValidationConfig
from doccorpus.corpus import CorpusIndex
from doccorpus.schema import (
    CodeSample,
    IssueKind,
    LineRange,
    Location,
    Page,
    ProseBlock,
    ValidationIssue,
)
from doccorpus.validation import ReferenceValidator, resolve_target, sort_issues, validate


def make_page(path, *links, is_index=False):
    """Build a page whose single prose block holds one link per line."""
    text = "\n".join(f"[link]({target})" for target in links)
    blocks = [ProseBlock(text=text)] if links else []
    return Page(path=path, title=path, blocks=blocks, is_index=is_index)


def make_corpus(*pages):
    corpus = CorpusIndex()
    for page in pages:
        corpus.add_page(page)
    return corpus


class TestValidate(unittest.TestCase):
    """Test cases for internal link validation."""

    def test_resolving_link_has_no_issues(self):
        corpus = make_corpus(make_page("/a", "/b"), make_page("/b"))
        self.assertEqual(validate(corpus), [])

    def test_missing_target_is_broken_link(self):
        corpus = make_corpus(make_page("/a", "/missing"))
        issues = validate(corpus)
        self.assertEqual(len(issues), 1)
        issue = issues[0]
        self.assertEqual(issue.kind, IssueKind.BROKEN_LINK)
        self.assertEqual(issue.source_path, "/a")
        self.assertEqual(issue.target, "/missing")
        self.assertEqual(issue.location, Location(line=1, column=1, block_index=0))

    def test_one_issue_per_broken_reference(self):
        corpus = make_corpus(make_page("/a", "/b", "/x", "/b", "/y"), make_page("/b"))
        issues = validate(corpus)
        self.assertEqual([issue.target for issue in issues], ["/x", "/y"])
        self.assertEqual([issue.location.line for issue in issues], [2, 4])

    def test_idempotent(self):
        corpus = make_corpus(
            make_page("/b", "/nope", "https://"),
            make_page("/a", "/gone"),
        )
        validator = ReferenceValidator()
        self.assertEqual(validator.validate(corpus), validator.validate(corpus))

    def test_issues_ordered_by_source_then_location(self):
        corpus = make_corpus(
            make_page("/b", "/x2", "/x1"),
            make_page("/a", "/y"),
        )
        issues = validate(corpus)
        self.assertEqual(
            [(issue.source_path, issue.target) for issue in issues],
            [("/a", "/y"), ("/b", "/x2"), ("/b", "/x1")],
        )

    def test_fragment_and_suffix_are_ignored(self):
        corpus = make_corpus(
            make_page("/guide/intro", "/guide/setup.md#install", "setup.mdx?tab=1"),
            make_page("/guide/setup"),
        )
        self.assertEqual(validate(corpus), [])

    def test_empty_target_is_broken(self):
        corpus = make_corpus(make_page("/a", ""))
        issues = validate(corpus)
        self.assertEqual(len(issues), 1)
        self.assertIn("empty", issues[0].detail)

    def test_anchor_and_ignored_schemes_are_skipped(self):
        corpus = make_corpus(make_page("/a", "#usage", "mailto:team@example.com"))
        self.assertEqual(validate(corpus), [])


class TestResolveTarget(unittest.TestCase):
    """Test cases for turning link targets into page paths."""

    def setUp(self):
        self.config = ValidationConfig(route_prefix="/docs")
        self.page = make_page("/guide/intro")
        self.index_page = make_page("/guide", is_index=True)

    def test_relative_to_directory(self):
        self.assertEqual(resolve_target("setup", self.page, self.config), "/guide/setup")
        self.assertEqual(resolve_target("./setup.md", self.page, self.config), "/guide/setup")

    def test_relative_to_index_page(self):
        self.assertEqual(
            resolve_target("setup", self.index_page, self.config), "/guide/setup"
        )

    def test_parent_directory(self):
        self.assertEqual(resolve_target("../api/", self.page, self.config), "/api")
        self.assertEqual(resolve_target("../../../x", self.page, self.config), "/x")

    def test_index_suffix(self):
        self.assertEqual(resolve_target("/api/index.mdx", self.page, self.config), "/api")

    def test_route_prefix_is_stripped(self):
        self.assertEqual(
            resolve_target("/docs/guide/setup", self.page, self.config), "/guide/setup"
        )
        self.assertEqual(resolve_target("/blog/post", self.page, self.config), "/blog/post")

    def test_percent_encoding(self):
        self.assertEqual(
            resolve_target("/my%20page", self.page, self.config), "/my page"
        )

    def test_fragment_only_query_is_self(self):
        self.assertEqual(resolve_target("?x=1", self.page, self.config), "/guide/intro")


class TestExternalLinks(unittest.TestCase):
    """Test cases for syntactic URL checks."""

    def broken_targets(self, *targets):
        corpus = make_corpus(make_page("/a", *targets))
        return [issue.target for issue in validate(corpus)]

    def test_well_formed_urls(self):
        self.assertEqual(
            self.broken_targets(
                "https://example.com/docs?q=1#x",
                "http://localhost:8080",
                "//cdn.example.com/lib.js",
                "ftp://files.example.com/a.tar.gz",
            ),
            [],
        )

    def test_missing_host(self):
        self.assertEqual(
            self.broken_targets("https://", "http:///path", "//"),
            ["https://", "http:///path", "//"],
        )

    def test_unsupported_scheme(self):
        corpus = make_corpus(make_page("/a", "javascript:void(0)"))
        (issue,) = validate(corpus)
        self.assertIn("unsupported scheme", issue.detail)

    def test_invalid_ipv6(self):
        self.assertEqual(self.broken_targets("http://[::1/x"), ["http://[::1/x"])

    def test_custom_schemes(self):
        config = ValidationConfig(external_schemes=["https", "vscode"])
        corpus = make_corpus(make_page("/a", "vscode://file/x", "http://example.com"))
        issues = validate(corpus, config)
        self.assertEqual([issue.target for issue in issues], ["http://example.com"])


class TestCodeSamples(unittest.TestCase):
    """Test cases for MalformedRange issues."""

    def test_bad_ranges_reported_once_each(self):
        page = Page(
            path="/a",
            title="A",
            blocks=[
                ProseBlock(text="intro"),
                CodeSample(
                    text="one\ntwo",
                    start_line=3,
                    highlighted=(LineRange(start=2, end=1), LineRange(start=1, end=5)),
                    malformed_annotations=("x",),
                ),
            ],
        )
        issues = validate(make_corpus(page))
        self.assertEqual([issue.kind for issue in issues], [IssueKind.MALFORMED_RANGE] * 3)
        self.assertTrue(all(issue.location.line == 3 for issue in issues))
        self.assertTrue(all(issue.location.block_index == 1 for issue in issues))

    def test_range_check_can_be_disabled(self):
        page = Page(
            path="/a",
            title="A",
            blocks=[CodeSample(text="x", highlighted=(LineRange(start=9, end=9),))],
        )
        config = ValidationConfig(check_code_ranges=False)
        self.assertEqual(validate(make_corpus(page), config), [])


class TestIssueFormatting(unittest.TestCase):
    """Test cases for ValidationIssue helpers."""

    def test_format(self):
        issue = ValidationIssue(
            kind=IssueKind.BROKEN_LINK,
            source_path="/a",
            location=Location(line=3, column=5),
            detail="link target '/b' does not resolve",
            target="/b",
        )
        self.assertEqual(
            issue.format(), "/a:3:5: BrokenLink: link target '/b' does not resolve"
        )
        self.assertIn('"kind": "BrokenLink"', issue.to_json())

    def test_sort_without_location_first(self):
        located = ValidationIssue(
            kind=IssueKind.BROKEN_LINK,
            source_path="/a",
            location=Location(line=1),
            detail="x",
        )
        unlocated = ValidationIssue(
            kind=IssueKind.DUPLICATE_PATH, source_path="/a", detail="dup"
        )
        self.assertEqual(sort_issues([located, unlocated]), [unlocated, located])


if __name__ == "__main__":
    unittest.main()
