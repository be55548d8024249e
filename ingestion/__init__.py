"""
Cache build pipeline: extract from the content API, transform per entity,
load into a platform's embedded store.

Modules:
    base: Transform Context and the abstract Transformer (pagination, modes)
    targets: Per-platform store files, schema, repository and transformers
    snapshot: Clean-snapshot cleanup and live store rebuild
    runner: Orchestrator running a platform's transformers in order
    cli: Command line entry point

Subpackages:
    extractors: GraphQL client for the content API
    queries: GraphQL documents, one per entity
    transformers: One transformer per entity and platform
    loaders: Repositories with idempotent upsert for both stores

Usage:
    from ingestion.runner import CacheRunner

    result = await CacheRunner("android", language_id="529", language_tag="en").run()
    print(result["records"])

Error Handling:
    Extraction errors from core.exceptions are raised at the HTTP boundary
    and propagate unchanged through transformers and the runner.
"""
