"""Brand name to logo resolution and batch copying.

Logos follow a filename convention: ``<brand>.svg`` is the base logo and
``<brand>_<variant>.svg`` (``github_dark``) or, for hyphenated brands,
``<brand>-<part>_<variant>.svg`` (``apple-music_wordmark``) are variants.
Matching is case-insensitive; identifiers are returned as stored.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from brandcn.config.constants import DISPLAY_SUFFIXES, VARIANT_SUFFIXES
from brandcn.config.logging import get_logger
from brandcn.exceptions import BrandcnError
from brandcn.models import BatchSummary, LogoOperationResult, ProcessOptions
from brandcn.store import LogoStore

logger = get_logger(__name__)


def _is_variant_of(logo_lower: str, brand_lower: str) -> bool:
    """True if ``logo_lower`` is a variant file of ``brand_lower`` (both lowercase)."""
    if logo_lower.startswith(brand_lower + "_"):
        return True
    hyphen_prefix = brand_lower + "-"
    return logo_lower.startswith(hyphen_prefix) and "_" in logo_lower[len(hyphen_prefix) :]


def find_logo_variants(brand_name: str, available_logos: Sequence[str]) -> list[str]:
    """Return every available logo belonging to ``brand_name``.

    A logo matches when it equals the brand name, starts with ``brand_``, or
    starts with ``brand-`` and has an underscore somewhere after that prefix.
    The order of ``available_logos`` is preserved.

    Example:
        >>> find_logo_variants("github", ["github", "github_dark", "gitlab"])
        ['github', 'github_dark']
    """
    brand = brand_name.lower()
    matches = []
    for logo in available_logos:
        lower = logo.lower()
        if lower == brand or _is_variant_of(lower, brand):
            matches.append(logo)
    return matches


def filter_by_variants(logo_names: Sequence[str], options: ProcessOptions) -> list[str]:
    """Keep only the logos selected by the variant flags.

    With no flag set the list is returned as is. Otherwise a logo is kept
    when its name contains a requested suffix. Logos carrying any other
    variant suffix are dropped. A base logo (no variant suffix) is kept only
    when no other entry in ``logo_names`` is one of its variants, so a brand
    that ships no variants still gets its only logo.
    """
    if not options.has_variant_filter:
        return list(logo_names)

    requested = options.requested_suffixes
    lowered = [name.lower() for name in logo_names]
    selected = []
    for name, lower in zip(logo_names, lowered):
        if any(suffix in lower for suffix in requested):
            selected.append(name)
            continue
        if any(suffix in lower for suffix in VARIANT_SUFFIXES):
            continue
        has_siblings = any(
            other != lower and _is_variant_of(other, lower) for other in lowered
        )
        if not has_siblings:
            selected.append(name)
    return selected


def get_variant_type(logo_name: str, base_name: str) -> str | None:
    """Classify a logo for display: dark, light, wordmark, default, icon or logo."""
    lower = logo_name.lower()
    for suffix in VARIANT_SUFFIXES:
        if suffix in lower:
            return suffix[1:]
    if lower == base_name.lower():
        return "default"
    for suffix in DISPLAY_SUFFIXES:
        if suffix in lower:
            return suffix[1:]
    return None


def get_base_name(logo_name: str) -> str:
    """Brand part of a logo name: text before the first ``_``, then before the first ``-``."""
    return logo_name.split("_")[0].split("-")[0]


def group_by_brand(logo_names: Iterable[str]) -> dict[str, list[str]]:
    """Group logos under their base brand name, both levels sorted."""
    groups: dict[str, list[str]] = {}
    for logo in logo_names:
        groups.setdefault(get_base_name(logo), []).append(logo)
    return {base: sorted(groups[base]) for base in sorted(groups)}


def _process_one(
    logo_name: str,
    available_logos: Sequence[str],
    options: ProcessOptions,
    library: LogoStore,
    target: LogoStore,
) -> list[LogoOperationResult]:
    variants = find_logo_variants(logo_name, available_logos)
    if not variants:
        if not library.exists(logo_name):
            error = f'Logo "{logo_name}" not found in library'
            return [LogoOperationResult.failed(logo_name, error)]
        variants = [logo_name]

    filtered = filter_by_variants(variants, options)
    if not filtered:
        return [
            LogoOperationResult.failed(
                logo_name, f'No variants found for "{logo_name}" matching the specified flags'
            )
        ]

    results = []
    for variant in filtered:
        if target.exists(variant):
            logger.debug("Skipping %s: already in %s", variant, target.directory)
            results.append(LogoOperationResult.already_exists(variant))
            continue
        try:
            library.copy_to(variant, target)
        except (BrandcnError, OSError) as e:
            logger.debug("Copy of %s failed: %s", variant, e)
            results.append(LogoOperationResult.failed(variant, str(e)))
        else:
            results.append(LogoOperationResult.added(variant))
    return results


def process_logos(
    logo_names: Sequence[str],
    options: ProcessOptions | None = None,
    *,
    library: LogoStore,
    target: LogoStore,
) -> list[LogoOperationResult]:
    """Copy the logos for each brand name from ``library`` into ``target``.

    Names are handled one after another in input order. Failures are
    recorded as results and never stop the batch; files already in the
    target are reported as skipped and left untouched.

    Args:
        logo_names: Validated brand names.
        options: Variant flags; ``None`` copies every variant.
        library: Store to read logos from.
        target: Store to write logos into.

    Returns:
        One result per copied/skipped/failed identifier, or one failure per
        brand name that could not be resolved.

    Raises:
        StoreReadError: If the library cannot be listed at all.
    """
    options = options or ProcessOptions()
    available_logos = library.list_logos()
    logger.info("Processing %d logo name(s) into %s", len(logo_names), target.directory)

    results: list[LogoOperationResult] = []
    for logo_name in logo_names:
        try:
            results.extend(_process_one(logo_name, available_logos, options, library, target))
        except Exception as e:
            logger.error("Unexpected error processing %s: %s", logo_name, e)
            results.append(
                LogoOperationResult.failed(logo_name, str(e) or "Unknown error occurred")
            )
    return results


def summarize_results(results: Iterable[LogoOperationResult]) -> BatchSummary:
    """Count added, skipped and failed results."""
    summary = BatchSummary()
    for result in results:
        if not result.success:
            summary.failed += 1
        elif result.skipped:
            summary.skipped += 1
        else:
            summary.added += 1
    return summary
