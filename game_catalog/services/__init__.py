"""Services Layer — persistence shells and the catalog orchestrator.

Invariants:
    - One component per concern: CategoryTree, ItemCatalog, InventoryLedger, UserDirectory
    - CatalogService is the only caller of InventoryLedger and applies the access policy

Design Decisions:
    - Components take an AsyncSession per request; no module-level state
"""
