"""
Site generation executor: plans a site, renders each page in isolation and
writes the results.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

from ..config.models import BusinessProfile, ConfigurationError, GenerationOptions, PageKind
from ..registry import Registry, default_registry
from ..render import page_filename, render_page
from ..util import ensure_directory, write_text_file
from .composer import PageSpecification, compose_page, plan_site

logger = logging.getLogger(__name__)


@dataclass
class SiteReport:
    """
    Outcome of one generation run.

    Attributes:
        output_dir: Directory pages were (or would be) written to.
        archetype_id: Archetype the business was classified into.
        industry: Canonical industry key.
        family: Industry family.
        variant: Research layout variant in use, if any.
        pages: Page kind -> composed specification, for every page that rendered.
        documents: Page kind -> rendered HTML.
        written: Page kind -> path of the written file.
        failures: Page kind -> error message, for pages that could not be produced.
    """

    output_dir: Optional[Path]
    archetype_id: str
    industry: str
    family: str
    variant: Optional[str] = None
    pages: Dict[str, PageSpecification] = field(default_factory=dict)
    documents: Dict[str, str] = field(default_factory=dict)
    written: Dict[str, Path] = field(default_factory=dict)
    failures: Dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.failures

    def summary_rows(self) -> List[Tuple[str, str, str]]:
        """(page, status, detail) rows in generation order."""
        rows: List[Tuple[str, str, str]] = []
        for kind in list(self.pages) + [kind for kind in self.failures if kind not in self.pages]:
            if kind in self.failures:
                rows.append((kind, "failed", self.failures[kind]))
            elif kind in self.written:
                rows.append((kind, "written", str(self.written[kind])))
            else:
                rows.append((kind, "rendered", self.pages[kind].sections[0].type if self.pages[kind].sections else ""))
        return rows


def generate_site(
    profile: BusinessProfile,
    options: Optional[GenerationOptions] = None,
    *,
    pages: Optional[Sequence[PageKind | str]] = None,
    output_dir: Optional[Path] = None,
    dry_run: bool = False,
    registry: Optional[Registry] = None,
) -> SiteReport:
    """
    Generate every requested page for a business.

    Each page is composed and rendered independently; a failure is logged and
    recorded in ``SiteReport.failures`` while the remaining pages are still
    produced. Pages are written to ``output_dir`` unless ``dry_run`` is set.

    Raises:
        ConfigurationError: For invalid request options; these abort the run.
    """
    registry = registry or default_registry()
    plan = plan_site(profile, options, pages, registry)
    report = SiteReport(
        output_dir=Path(output_dir) if output_dir else None,
        archetype_id=plan.archetype.id,
        industry=plan.industry,
        family=plan.archetype.family,
        variant=plan.variant,
    )
    logger.info(
        "Generating %d page(s) for '%s' with archetype %s",
        len(plan.pages),
        profile.name or "(unnamed)",
        plan.archetype.id,
    )

    for kind in plan.pages:
        try:
            spec = compose_page(plan, kind, registry)
            document = render_page(spec)
        except ConfigurationError:
            raise
        except Exception as exc:
            logger.error("Failed to generate %s page: %s", kind.value, exc, exc_info=True)
            report.failures[kind.value] = str(exc) or exc.__class__.__name__
            continue
        report.pages[kind.value] = spec
        report.documents[kind.value] = document

    if report.output_dir is not None and not dry_run:
        write_site(report, report.output_dir)
    _log_site_summary(report)
    return report


def write_site(report: SiteReport, output_dir: Path) -> SiteReport:
    """
    Write each rendered document as ``index.html`` or ``<kind>.html``.

    Write failures are recorded per page like generation failures.
    """
    destination = ensure_directory(output_dir)
    report.output_dir = destination
    for kind, document in report.documents.items():
        path = destination / page_filename(PageKind(kind))
        try:
            write_text_file(path, document)
        except OSError as exc:
            logger.error("Failed to write %s page to %s: %s", kind, path, exc, exc_info=True)
            report.failures[kind] = f"write failed: {exc}"
            continue
        report.written[kind] = path
        logger.info("Wrote %s page → %s", kind, path)
    return report


def _log_site_summary(report: SiteReport) -> None:
    rows = report.summary_rows()
    if not rows:
        logger.info("Site summary – no pages generated.")
        return
    width = max(len("Page"), *(len(page) for page, _, _ in rows))
    header = f"{'Page':<{width}} {'Status':<9} Detail"
    lines = [header, "-" * len(header)]
    lines.extend(f"{page:<{width}} {status:<9} {detail}" for page, status, detail in rows)
    logger.info("Site summary (%s):\n%s", report.archetype_id, "\n".join(lines))
