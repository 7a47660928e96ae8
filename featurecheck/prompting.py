"""Instructions printed for a coding agent when no repository path is given."""

from __future__ import annotations

ANALYSIS_PROMPT = """\
Map the feature architecture of this codebase from end to end.

Step 1: Skim the git log to gauge the repository's age and activity. Suggest
a churn window to the user based on what you find (for example "about 40
commits a month since 2022, so the last 6 months looks right for churn") and
ask whether there is an area they want you to focus on.

Step 2: Inspect the top-level directory layout and pick out directories that
would distort symbol counts and churn: vendored assets, generated code,
third-party bundles, design docs. Then run:
  repo-feature-check . --json /tmp/rfc-<repo-name>-<YYYYMMDD-HHmmss>.json --since <chosen-date> --exclude <dir1> --exclude <dir2> ...
Use the real repository directory name and the current timestamp in the
file name. node_modules, .git, dist, build and *.d.ts are excluded already;
--exclude is for project-specific vendored or generated directories.

Step 3: Read the JSON. It lists every symbol with its file, name, kind and
scope. Assign every one of them to a feature, not a sample. Work from
directory clusters and let path and symbol names guide the assignment.

Step 4: Where a cluster's purpose is unclear from names alone, open the
source files. Start with high-churn areas and large clusters. Aim for full
coverage with every symbol assigned to a feature.

Step 5: Write the final report to /tmp/rfc-<repo-name>-report.md and show
it. Every section must be a markdown pipe table. If some symbols fit no
feature, add an "Uncategorized" row with their count.

Follow this layout, copying the pipe-table syntax as written:

```markdown
# Feature Architecture: <repo-name>
Analyzed <date> | <total> symbols | <n> features | <n> categories

## Feature Map

| Category | Feature | Symbols | F | M | C | Churn | Hotspot | Description |
|----------|---------|--------:|--:|--:|--:|------:|---------|-------------|
| Commerce | Checkout | 812 | 40 | 602 | 170 | 2210 | HIGH | Cart, payment capture and receipts |

Column key: F=functions, M=methods, C=classes, Churn=lines added+deleted, Hotspot=LOW/MED/HIGH

## Feature Detail

| Feature | Sub-Feature | Symbols | Key Files | Description |
|---------|-------------|--------:|-----------|-------------|
| Checkout | Payment Capture | 260 | PaymentService.kt, PayButton.tsx | Card authorisation and retries |

Break each feature into its distinct capabilities and name them precisely.

## Top 20 Hotspot Files

| Churn | Commits | Feature | File |
|------:|--------:|---------|------|
| 3120 | 18 | Checkout | web/checkout/CheckoutPage.tsx |

## Cross-Cutting Concerns

| Concern | Symbols | Used By | Notes |
|---------|--------:|---------|-------|
| API client types | 640 | All frontend | Generated from the schema |

## Architectural Observations

| Observation | Affected Features | Severity |
|-------------|-------------------|----------|
| OrderManager.kt has grown into a god object | Checkout, Orders | HIGH |
```

The rows above only show the format; replace them with real findings.
Keep user-facing features in the Feature Map and put shared infrastructure
under Cross-Cutting Concerns. Use the churn data to call out hotspots.
"""

USAGE_HINTS = (
    "To run extraction directly: repo-feature-check <repo-path> [--json out.json] [--since date]",
    "Full options: repo-feature-check --help",
)


__all__ = ["ANALYSIS_PROMPT", "USAGE_HINTS"]
