"""Tests for variant resolution, filtering and batch processing."""

from pathlib import Path

import pytest

from brandcn.exceptions import StoreReadError
from brandcn.models import BatchStatus, LogoOperationResult, ProcessOptions
from brandcn.resolver import (
    filter_by_variants,
    find_logo_variants,
    get_base_name,
    get_variant_type,
    group_by_brand,
    process_logos,
    summarize_results,
)
from brandcn.store import LogoStore

GITHUB = ["github", "github_dark", "github_light", "github_wordmark"]


class TestFindLogoVariants:
    """Tests for find_logo_variants."""

    def test_returns_base_and_variants_in_source_order(self):
        assert find_logo_variants("github", GITHUB) == GITHUB

    def test_no_match(self):
        assert find_logo_variants("vercel", ["neon", "figma"]) == []

    def test_case_insensitive_but_preserves_identifiers(self):
        """Matching ignores case; identifiers come back verbatim."""
        available = ["GitHub", "GITHUB_Dark", "gitlab"]
        assert find_logo_variants("github", available) == ["GitHub", "GITHUB_Dark"]
        assert find_logo_variants("GITHUB", available) == ["GitHub", "GITHUB_Dark"]

    def test_prefix_without_separator_does_not_match(self):
        """``githubcopilot`` is a different brand."""
        assert find_logo_variants("github", ["github", "githubcopilot"]) == ["github"]

    def test_hyphenated_brand_with_variant(self):
        """``brand-x_variant`` matches, ``brand-x`` alone does not."""
        available = ["apple", "apple-music", "apple-music_wordmark", "apple_dark"]
        assert find_logo_variants("apple", available) == [
            "apple",
            "apple-music_wordmark",
            "apple_dark",
        ]

    def test_hyphenated_brand_name_itself(self):
        available = ["apple", "apple-music", "apple-music_wordmark"]
        assert find_logo_variants("apple-music", available) == [
            "apple-music",
            "apple-music_wordmark",
        ]


class TestFilterByVariants:
    """Tests for filter_by_variants."""

    def test_no_flags_returns_input(self):
        assert filter_by_variants(GITHUB, ProcessOptions()) == GITHUB

    def test_dark_only(self):
        assert filter_by_variants(GITHUB, ProcessOptions(dark=True)) == ["github_dark"]

    def test_multiple_flags(self):
        options = ProcessOptions(dark=True, wordmark=True)
        assert filter_by_variants(GITHUB, options) == ["github_dark", "github_wordmark"]

    def test_base_entries_without_variants_pass(self):
        """Brands with no variants keep their only logo."""
        assert filter_by_variants(["vercel", "neon"], ProcessOptions(dark=True)) == [
            "vercel",
            "neon",
        ]

    def test_unrequested_variant_never_leaks(self):
        assert filter_by_variants(["apple_light"], ProcessOptions(dark=True)) == []

    def test_case_insensitive_suffix(self):
        assert filter_by_variants(["GitHub_DARK"], ProcessOptions(dark=True)) == ["GitHub_DARK"]

    def test_base_dropped_when_hyphenated_sibling_present(self):
        """A ``brand-x_variant`` sibling also counts as covering the base."""
        names = ["apple", "apple-music_wordmark"]
        assert filter_by_variants(names, ProcessOptions(wordmark=True)) == [
            "apple-music_wordmark"
        ]

    def test_base_kept_when_only_unrelated_entries(self):
        """Siblings are checked with the resolution prefix rule, not loose prefixes."""
        names = ["github", "githubcopilot"]
        assert filter_by_variants(names, ProcessOptions(light=True)) == names

    def test_does_not_mutate_input(self):
        names = list(GITHUB)
        filter_by_variants(names, ProcessOptions(dark=True))
        assert names == GITHUB


class TestVariantTypeAndGrouping:
    """Tests for display helpers."""

    @pytest.mark.parametrize(
        "logo,base,expected",
        [
            ("github_dark", "github", "dark"),
            ("github_light", "github", "light"),
            ("github_wordmark", "github", "wordmark"),
            ("github", "github", "default"),
            ("GitHub", "github", "default"),
            ("supabase_icon", "supabase", "icon"),
            ("acme_logo", "acme", "logo"),
            ("apple-music", "apple", None),
        ],
    )
    def test_get_variant_type(self, logo, base, expected):
        assert get_variant_type(logo, base) == expected

    def test_get_base_name(self):
        assert get_base_name("apple-music_wordmark") == "apple"
        assert get_base_name("github_dark") == "github"
        assert get_base_name("vercel") == "vercel"

    def test_group_by_brand(self):
        groups = group_by_brand(["neon", "github_dark", "apple-music", "github", "apple"])
        assert list(groups) == ["apple", "github", "neon"]
        assert groups["apple"] == ["apple", "apple-music"]
        assert groups["github"] == ["github", "github_dark"]


class TestProcessLogos:
    """Tests for process_logos."""

    def test_copies_base_logo(self, library: LogoStore, target: LogoStore):
        results = process_logos(["vercel"], library=library, target=target)
        assert results == [LogoOperationResult(logo_name="vercel", success=True)]
        assert not results[0].skipped
        assert (target.directory / "vercel.svg").is_file()

    def test_second_run_skips_existing(self, library: LogoStore, target: LogoStore):
        """Running twice reports the file as already present."""
        process_logos(["vercel"], library=library, target=target)
        results = process_logos(["vercel"], library=library, target=target)
        assert len(results) == 1
        assert results[0].success
        assert results[0].skipped
        assert "already exists" in results[0].reason

    def test_existing_file_is_not_modified(self, library: LogoStore, target: LogoStore):
        target.ensure_directory()
        target.path_for("vercel").write_text("mine")
        process_logos(["vercel"], library=library, target=target)
        assert target.path_for("vercel").read_text() == "mine"

    def test_not_found(self, library: LogoStore, target: LogoStore):
        results = process_logos(["nonexistent-logo"], library=library, target=target)
        assert len(results) == 1
        assert not results[0].success
        assert results[0].logo_name == "nonexistent-logo"
        assert "not found in library" in results[0].error

    def test_mixed_batch_does_not_raise(self, library: LogoStore, target: LogoStore):
        """One bad name does not stop the rest."""
        results = process_logos(
            ["vercel", "invalid-name-that-does-not-exist"], library=library, target=target
        )
        assert [r.success for r in results] == [True, False]

    def test_copies_all_variants_in_order(self, library: LogoStore, target: LogoStore):
        results = process_logos(["github"], library=library, target=target)
        assert [r.logo_name for r in results] == GITHUB
        assert all(r.success and not r.skipped for r in results)

    def test_variant_flags(self, library: LogoStore, target: LogoStore):
        results = process_logos(
            ["github", "vercel"], ProcessOptions(dark=True), library=library, target=target
        )
        assert [r.logo_name for r in results] == ["github_dark", "vercel"]
        assert sorted(p.name for p in target.directory.iterdir()) == [
            "github_dark.svg",
            "vercel.svg",
        ]

    def test_no_variant_matching_flags(self, library: LogoStore, target: LogoStore):
        """A brand with only an unrequested variant fails as a whole."""
        options = ProcessOptions(light=True)
        results = process_logos(["apple"], options, library=library, target=target)
        assert len(results) == 1
        assert results[0].logo_name == "apple"
        assert not results[0].success
        assert "matching the specified flags" in results[0].error

    def test_results_follow_input_order(self, library: LogoStore, target: LogoStore):
        results = process_logos(["neon", "figma", "vercel"], library=library, target=target)
        assert [r.logo_name for r in results] == ["neon", "figma", "vercel"]

    def test_literal_fallback_when_no_variant_match(self, tmp_path: Path, target: LogoStore):
        """A name the prefix rules miss is still found by a direct lookup."""
        library = LogoStore(tmp_path / "lib")
        library.ensure_directory()
        (library.directory / "Acme.svg").write_text("<svg/>")
        # Listing is taken first; a logo added afterwards is only visible to exists()
        calls = []
        original = library.list_logos

        def list_then_add():
            calls.append(1)
            result = original()
            (library.directory / "late.svg").write_text("<svg/>")
            return result

        library.list_logos = list_then_add
        results = process_logos(["late"], library=library, target=target)
        assert calls == [1]
        assert results == [LogoOperationResult(logo_name="late", success=True)]

    def test_copy_error_is_per_identifier(self, library, target, monkeypatch):
        """A failed copy is recorded and the remaining variants still run."""
        original = LogoStore.copy_to

        def flaky_copy(self, logo_name, dest):
            if logo_name == "github_light":
                raise PermissionError(13, "Permission denied")
            return original(self, logo_name, dest)

        monkeypatch.setattr(LogoStore, "copy_to", flaky_copy)
        results = process_logos(["github"], library=library, target=target)
        assert [r.success for r in results] == [True, True, False, True]
        assert results[2].logo_name == "github_light"
        assert "Permission denied" in results[2].error

    def test_unexpected_error_becomes_result(self, library, target, monkeypatch):
        """Errors outside the copy step are converted to a failure for the name."""

        def boom(*args, **kwargs):
            raise RuntimeError("boom")

        monkeypatch.setattr("brandcn.resolver.filter_by_variants", boom)
        results = process_logos(["vercel", "neon"], library=library, target=target)
        assert [(r.logo_name, r.success, r.error) for r in results] == [
            ("vercel", False, "boom"),
            ("neon", False, "boom"),
        ]

    def test_unreadable_library_raises(self, tmp_path: Path, target: LogoStore):
        """Without a listing nothing can be resolved, so the batch aborts."""
        with pytest.raises(StoreReadError):
            process_logos(["vercel"], library=LogoStore(tmp_path / "missing"), target=target)


class TestSummarizeResults:
    """Tests for summarize_results."""

    def test_counts_and_status(self):
        results = [
            LogoOperationResult.added("vercel"),
            LogoOperationResult.already_exists("neon"),
            LogoOperationResult.failed("nope", "not found"),
        ]
        summary = summarize_results(results)
        assert (summary.added, summary.skipped, summary.failed) == (1, 1, 1)
        assert summary.status == BatchStatus.PARTIAL

    def test_all_failed(self):
        summary = summarize_results([LogoOperationResult.failed("nope", "not found")])
        assert summary.status == BatchStatus.ALL_FAILED

    def test_all_skipped_is_success(self):
        summary = summarize_results([LogoOperationResult.already_exists("neon")])
        assert summary.status == BatchStatus.SUCCESS

    def test_empty(self):
        assert summarize_results([]).status == BatchStatus.SUCCESS
